from dataclasses import dataclass


@dataclass
class User:
    id: int
    username: str  # display name chosen at registration
    email: str  # unique, used to sign in

    def to_dict(self) -> dict:
        """Convert user to dictionary for display or storage."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
        }
