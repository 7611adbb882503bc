"""User service for database operations."""

from typing import Optional
from models.user import User


class UserService:
    """Service for managing registered users."""

    def __init__(self, db_manager):
        self.db_manager = db_manager

    def find(self, user_id: int) -> Optional[User]:
        """Get a single user by ID.

        Args:
            user_id: The user ID to find.

        Returns:
            User object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT id, username, email FROM users WHERE id = ?",
                (user_id,),
            )
            row = cursor.fetchone()

            if row:
                return User(id=row[0], username=row[1], email=row[2])
            return None

    def find_by_email(self, email: str) -> Optional[User]:
        """Get a single user by email address (case-insensitive).

        Args:
            email: The email address to look up.

        Returns:
            User object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT id, username, email FROM users WHERE email = ?",
                (email.strip().lower(),),
            )
            row = cursor.fetchone()

            if row:
                return User(id=row[0], username=row[1], email=row[2])
            return None

    def create(self, username: str, email: str) -> User:
        """Create a new user.

        Args:
            username: Display name.
            email: Email address, stored lower-cased.

        Returns:
            The created User object with id populated.

        Raises:
            sqlite3.IntegrityError: If the email is already registered.
        """
        email = email.strip().lower()
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "INSERT INTO users (username, email) VALUES (?, ?)",
                (username, email),
            )
            conn.commit()

            return User(id=cursor.lastrowid, username=username, email=email)

    def delete(self, user_id: int) -> bool:
        """Delete a user and, through cascading keys, their categories and session.

        Args:
            user_id: The user ID to delete.

        Returns:
            True if the user was deleted, False if not found.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
            conn.commit()
            return cursor.rowcount > 0
