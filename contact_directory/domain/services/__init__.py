"""Domain services."""

from contact_directory.domain.services.contact_service import ContactService
from contact_directory.domain.services.directory_service import DirectoryService

__all__ = ["ContactService", "DirectoryService"]
