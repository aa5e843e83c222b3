"""Repository layer for data access."""

from contact_directory.persistence.repositories.base import BaseRepository
from contact_directory.persistence.repositories.contact_repository import ContactRepository
from contact_directory.persistence.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "ContactRepository",
    "UserRepository",
]
