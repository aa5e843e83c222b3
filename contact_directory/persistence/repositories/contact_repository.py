"""Contact repository."""

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from contact_directory.domain.exceptions import ValidationError
from contact_directory.domain.schemas import PhoneAttributes
from contact_directory.domain.validation import TAKEN
from contact_directory.persistence.models.contact import Contact, Phone
from contact_directory.persistence.repositories.base import BaseRepository


class ContactRepository(BaseRepository[Contact]):
    """Repository for Contact entities and their phones."""

    def __init__(self, session: AsyncSession):
        """Initialize contact repository."""
        super().__init__(Contact, session)

    async def get_by_id(self, id: int) -> Contact | None:
        """Get contact by ID with phones loaded.

        Args:
            id: Contact ID

        Returns:
            Contact or None if not found
        """
        stmt = (
            select(Contact)
            .options(selectinload(Contact.phones))
            .where(Contact.id == id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_letter(self, letter: str | None = None) -> list[Contact]:
        """List contacts ordered by last name, then first name.

        Args:
            letter: Optional single character; only contacts whose last
                name starts with it (case-insensitive) are returned

        Returns:
            List of contacts with phones loaded
        """
        stmt = select(Contact).options(selectinload(Contact.phones))

        if letter:
            # SQLite's upper() only folds ASCII, so match both cases directly
            stmt = stmt.where(
                func.substr(Contact.lastname, 1, 1).in_({letter.upper(), letter.lower()})
            )

        stmt = stmt.order_by(Contact.lastname, Contact.firstname, Contact.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        """Check whether another contact already uses this email.

        Args:
            email: Email to look for (exact match)
            exclude_id: Contact ID to ignore, when updating that contact

        Returns:
            True if a different contact has this email
        """
        stmt = select(Contact.id).where(Contact.email == email)
        if exclude_id is not None:
            stmt = stmt.where(Contact.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def create_with_phones(
        self,
        firstname: str,
        lastname: str,
        email: str,
        phones: list[PhoneAttributes],
    ) -> Contact:
        """Persist a contact and its phones in a single commit.

        Raises:
            ValidationError: If the email was taken concurrently
        """
        contact = Contact(
            firstname=firstname,
            lastname=lastname,
            email=email,
            phones=_build_phones(phones),
        )
        self.session.add(contact)
        await self._commit()
        return contact

    async def replace(
        self,
        contact: Contact,
        firstname: str,
        lastname: str,
        email: str,
        phones: list[PhoneAttributes],
    ) -> Contact:
        """Replace a contact's attributes and phones in a single commit.

        Existing phones are removed and the submitted ones take their place.

        Raises:
            ValidationError: If the email was taken concurrently
        """
        contact.firstname = firstname
        contact.lastname = lastname
        contact.email = email
        contact.phones = _build_phones(phones)
        await self._commit()
        return contact

    async def destroy(self, contact: Contact) -> None:
        """Delete a contact and its phones in a single commit."""
        await self.session.delete(contact)
        await self.session.commit()

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            if "email" not in str(e.orig).lower():
                raise
            raise ValidationError({"email": [TAKEN]}) from e


def _build_phones(phones: list[PhoneAttributes]) -> list[Phone]:
    return [Phone(number=phone.number, phone_type=phone.phone_type) for phone in phones]
