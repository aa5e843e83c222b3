"""Database models."""

from contact_directory.persistence.models.contact import Contact, Phone
from contact_directory.persistence.models.user import User

__all__ = [
    "Contact",
    "Phone",
    "User",
]
