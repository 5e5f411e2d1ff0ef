from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies

    The password is kept exactly as submitted; there is no hashing step.
    """
    id: Optional[str]
    full_name: str
    email: str
    password: str
    image_path: Optional[str] = None

    @property
    def has_image(self) -> bool:
        return bool(self.image_path)
