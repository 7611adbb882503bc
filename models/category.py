"""Category model for grouping a user's snips."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Category:
    """Represents a user-defined category of snips.

    Attributes:
        id: Unique identifier (assigned by the backend).
        name: Display name, unique per user.
        user_id: Owning user, if known.
    """

    id: int
    name: str
    user_id: Optional[int] = None

    def matches(self, search_text: str) -> bool:
        """Check whether the name contains search_text, ignoring case."""
        return search_text.casefold() in self.name.casefold()
