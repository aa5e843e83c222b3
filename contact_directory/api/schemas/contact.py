"""Contact-related schemas."""

from pydantic import BaseModel

from contact_directory.domain.schemas import ContactAttributes


class PhoneResponse(BaseModel):
    """Phone response."""

    id: int | None = None
    number: str | None = None
    phone_type: str | None = None

    class Config:
        from_attributes = True


class ContactResponse(BaseModel):
    """Contact response.

    Also used for the unsaved contact template returned by the new action,
    in which case id, name and created_at are None.
    """

    id: int | None = None
    firstname: str | None = None
    lastname: str | None = None
    name: str | None = None
    email: str | None = None
    phones: list[PhoneResponse] = []
    created_at: str | None = None


class ContactsListResponse(BaseModel):
    """Contacts list response."""

    contacts: list[ContactResponse]
    total: int


class ContactFormErrorResponse(BaseModel):
    """Form re-presented with field errors."""

    view: str
    errors: dict[str, list[str]]
    contact: ContactAttributes
