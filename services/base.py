"""Base services container for dependency injection."""

from config import Config
from db.manager import DatabaseManager


class Services:
    """Container for all persistence services.

    Makes it easy to inject a test database manager.

    Args:
        config: Application configuration object.
        db_manager: Optional database manager for testing. If provided, config is
            not used to open the database.
    """

    def __init__(self, config: Config, db_manager=None):
        self.config = config
        self.db_manager = db_manager or DatabaseManager(config)

        # Lazy import to avoid circular dependencies
        from services.users import UserService
        from services.categories import CategoryService
        from services.sessions import SessionService

        self.users = UserService(self.db_manager)
        self.categories = CategoryService(self.db_manager)
        self.sessions = SessionService(self.db_manager)
