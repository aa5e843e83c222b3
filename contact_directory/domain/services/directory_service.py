"""Directory listing: letter filter and alphabetical ordering."""

from sqlalchemy.ext.asyncio import AsyncSession

from contact_directory.persistence.models.contact import Contact
from contact_directory.persistence.repositories.contact_repository import ContactRepository


class DirectoryService:
    """Read-only queries over the contact directory."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize directory service."""
        self.contact_repo = ContactRepository(session)

    async def list_contacts(self, letter: str | None = None) -> list[Contact]:
        """List contacts ordered by last name, then first name.

        Args:
            letter: Optional single character to match against the first
                character of the last name, case-insensitively. None or an
                empty string means no filter.

        Returns:
            Matching contacts; empty when nothing matches

        Raises:
            ValueError: If letter is longer than one character
        """
        if letter is not None and len(letter) > 1:
            raise ValueError(f"Letter filter must be a single character, got {letter!r}")
        return await self.contact_repo.list_by_letter(letter or None)
