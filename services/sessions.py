"""Session service tracking the signed-in user."""

from typing import Optional


class SessionService:
    """Persists the single active session for this installation."""

    def __init__(self, db_manager):
        self.db_manager = db_manager

    def current_user_id(self) -> Optional[int]:
        """Return the signed-in user's ID, or None when signed out."""
        with self.db_manager.connect() as conn:
            row = conn.execute("SELECT user_id FROM sessions WHERE id = 1").fetchone()
            return row[0] if row else None

    def start(self, user_id: int) -> None:
        """Sign a user in, replacing any existing session."""
        with self.db_manager.connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO sessions (id, user_id) VALUES (1, ?)",
                (user_id,),
            )
            conn.commit()

    def end(self) -> bool:
        """Sign out.

        Returns:
            True if a session was ended, False if nobody was signed in.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute("DELETE FROM sessions WHERE id = 1")
            conn.commit()
            return cursor.rowcount > 0
