"""Logging configuration for Savvy-Snip.

Sets up logging to both a dated log file and the console. Modules log through
children of the ``savvy_snip`` logger (``savvy_snip.auth.local`` and so on),
so the file shows which layer reported a failure while the console stays terse.
"""

import logging
from datetime import date
from typing import Optional
from config import Config

LOGGER_NAME = "savvy_snip"


def setup_logging(config: Config) -> logging.Logger:
    """Set up application logging with file and console handlers.

    Handlers live on the root application logger only; module loggers from
    get_logger() propagate to it.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured application logger.
    """
    # Create log directory if it doesn't exist
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)

    # Clear any existing handlers (in case this is called multiple times)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    # File records carry the module logger name; the console shows messages only
    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter("%(levelname)s - %(message)s")

    # File handler - logs to savvy-snip-{date}.log
    log_file_path = config.log_dir / f"savvy-snip-{date.today().isoformat()}.log"
    file_handler = logging.FileHandler(log_file_path)
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(detailed_formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level)
    console_handler.setFormatter(console_formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger(module_name: Optional[str] = None) -> logging.Logger:
    """Get the application logger, or a child of it for one module.

    Args:
        module_name: Usually ``__name__``. When given, returns
            ``savvy_snip.<module_name>``.

    Returns:
        The requested logger instance.
    """
    if not module_name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{module_name}")
