"""Contact service: the create, read, update and delete actions."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from contact_directory.core.identity import SessionIdentity
from contact_directory.domain.exceptions import NotFound, ValidationError
from contact_directory.domain.outcomes import Outcome, Redirected, Rendered
from contact_directory.domain.policy import Action, enforce
from contact_directory.domain.schemas import ContactAttributes
from contact_directory.domain.services.directory_service import DirectoryService
from contact_directory.domain.validation import validate_contact
from contact_directory.persistence.models.contact import Contact, Phone
from contact_directory.persistence.repositories.contact_repository import ContactRepository

logger = logging.getLogger(__name__)


class ContactService:
    """Service for contact actions.

    Every action checks the access policy for the caller's identity
    before it reads or writes anything. Denied actions raise
    Unauthorized; lookups of unknown ids raise NotFound.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize contact service.

        Args:
            session: Database session
        """
        self.session = session
        self.contact_repo = ContactRepository(session)
        self.directory = DirectoryService(session)

    async def index(self, identity: SessionIdentity, letter: str | None = None) -> Rendered:
        """List contacts, optionally only those whose last name starts with a letter."""
        enforce(identity, Action.LIST)
        contacts = await self.directory.list_contacts(letter)
        return Rendered("index", contacts=contacts)

    async def show(self, identity: SessionIdentity, contact_id: int) -> Rendered:
        """Show a single contact."""
        enforce(identity, Action.SHOW)
        contact = await self._find(contact_id)
        return Rendered("show", contact=contact)

    async def new(self, identity: SessionIdentity) -> Rendered:
        """Build an unsaved contact with one empty phone per default phone type."""
        enforce(identity, Action.NEW)
        contact = Contact(
            phones=[Phone(phone_type=phone_type) for phone_type in Contact.PHONE_TYPES]
        )
        return Rendered("new", contact=contact)

    async def create(self, identity: SessionIdentity, attributes: ContactAttributes) -> Outcome:
        """Validate and persist a new contact with its phones.

        Returns:
            Redirect to the new contact, or the new form with field errors
        """
        enforce(identity, Action.CREATE)

        result = await validate_contact(self.contact_repo, attributes)
        if not result.is_valid:
            return Rendered("new", errors=result.errors, form=attributes)

        try:
            contact = await self.contact_repo.create_with_phones(
                firstname=attributes.firstname,
                lastname=attributes.lastname,
                email=attributes.email,
                phones=attributes.phones_attributes,
            )
        except ValidationError as e:
            return Rendered("new", errors=e.field_errors, form=attributes)

        logger.info(
            "Contact created",
            extra={"contact_id": contact.id, "phone_count": len(contact.phones)},
        )
        return Redirected("show", contact_id=contact.id)

    async def edit(self, identity: SessionIdentity, contact_id: int) -> Rendered:
        """Load a contact for editing."""
        enforce(identity, Action.EDIT)
        contact = await self._find(contact_id)
        return Rendered("edit", contact=contact)

    async def update(
        self, identity: SessionIdentity, contact_id: int, attributes: ContactAttributes
    ) -> Outcome:
        """Replace a contact's attributes and phones with the submitted set.

        The complete proposed state is validated before anything is written;
        on failure the persisted contact is left as it was.

        Returns:
            Redirect to the contact, or the edit form with field errors
        """
        enforce(identity, Action.UPDATE)
        contact = await self._find(contact_id)

        result = await validate_contact(self.contact_repo, attributes, exclude_id=contact.id)
        if not result.is_valid:
            return Rendered("edit", contact=contact, errors=result.errors, form=attributes)

        try:
            await self.contact_repo.replace(
                contact,
                firstname=attributes.firstname,
                lastname=attributes.lastname,
                email=attributes.email,
                phones=attributes.phones_attributes,
            )
        except ValidationError as e:
            # The failed commit was rolled back; reload the stored contact
            contact = await self._find(contact_id)
            return Rendered("edit", contact=contact, errors=e.field_errors, form=attributes)

        logger.info("Contact updated", extra={"contact_id": contact.id})
        return Redirected("show", contact_id=contact.id)

    async def destroy(self, identity: SessionIdentity, contact_id: int) -> Redirected:
        """Delete a contact and its phones."""
        enforce(identity, Action.DESTROY)
        contact = await self._find(contact_id)
        await self.contact_repo.destroy(contact)
        logger.info("Contact deleted", extra={"contact_id": contact_id})
        return Redirected("index")

    async def _find(self, contact_id: int) -> Contact:
        contact = await self.contact_repo.get_by_id(contact_id)
        if contact is None:
            raise NotFound(contact_id)
        return contact
