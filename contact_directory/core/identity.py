"""Session identity classification."""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contact_directory.persistence.models.user import User


class SessionIdentity(str, Enum):
    """Access level carried by the caller's session."""

    GUEST = "guest"
    USER = "user"
    ADMIN = "admin"

    @classmethod
    def for_user(cls, user: "User | None") -> "SessionIdentity":
        """Classify a resolved user, or the absence of one."""
        if user is None:
            return cls.GUEST
        if user.role == "admin":
            return cls.ADMIN
        return cls.USER
