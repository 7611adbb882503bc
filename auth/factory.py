"""Factory for creating auth backend instances."""

from config import Config
from auth.base import AuthManager
from auth.local import LocalAuthManager
from logger import get_logger

logger = get_logger(__name__)


def get_auth_manager(config: Config, services) -> AuthManager:
    """Create an auth backend based on configuration.

    Args:
        config: Application configuration.
        services: Services container used by database-backed backends.

    Returns:
        AuthManager instance.

    Raises:
        ValueError: If the configured backend is unknown.
    """
    backend = getattr(config, "auth_backend", None) or "local"

    if backend == "local":
        logger.debug(f"Using local auth backend ({config.db_path})")
        return LocalAuthManager(services)

    raise ValueError(f"Unknown auth backend: {backend}")
