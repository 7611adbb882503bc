"""Category service for database operations."""

from typing import List, Optional
from models.category import Category


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db_manager):
        """Initialize the category service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_all_for_user(self, user_id: int) -> List[Category]:
        """Get all categories belonging to a user.

        Args:
            user_id: Owning user ID.

        Returns:
            List of Category objects, in creation order.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT id, name, user_id FROM categories WHERE user_id = ? ORDER BY id",
                (user_id,),
            )
            return [
                Category(id=row[0], name=row[1], user_id=row[2])
                for row in cursor.fetchall()
            ]

    def find(self, category_id: int) -> Optional[Category]:
        """Get a single category by ID.

        Args:
            category_id: The category ID to find.

        Returns:
            Category object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT id, name, user_id FROM categories WHERE id = ?",
                (category_id,),
            )
            row = cursor.fetchone()

            if row:
                return Category(id=row[0], name=row[1], user_id=row[2])
            return None

    def find_by_name(self, user_id: int, name: str) -> Optional[Category]:
        """Get a user's category by exact name.

        Args:
            user_id: Owning user ID.
            name: The category name to find.

        Returns:
            Category object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT id, name, user_id FROM categories WHERE user_id = ? AND name = ?",
                (user_id, name),
            )
            row = cursor.fetchone()

            if row:
                return Category(id=row[0], name=row[1], user_id=row[2])
            return None

    def create(self, user_id: int, name: str) -> Category:
        """Create a new category for a user.

        Args:
            user_id: Owning user ID.
            name: Category name (unique per user).

        Returns:
            The created Category object with id populated.

        Raises:
            sqlite3.IntegrityError: If the user already has a category with this
                name, or the user does not exist.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "INSERT INTO categories (user_id, name) VALUES (?, ?)",
                (user_id, name),
            )
            conn.commit()

            return Category(id=cursor.lastrowid, name=name, user_id=user_id)

    def delete(self, category_id: int) -> bool:
        """Delete a category by ID.

        Args:
            category_id: The category ID to delete.

        Returns:
            True if category was deleted, False if not found.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute("DELETE FROM categories WHERE id = ?", (category_id,))
            conn.commit()
            return cursor.rowcount > 0
