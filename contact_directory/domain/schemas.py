"""Submitted contact attributes."""

from pydantic import BaseModel, Field


class PhoneAttributes(BaseModel):
    """Nested phone attributes submitted with a contact."""

    number: str | None = None
    phone_type: str | None = None


class ContactAttributes(BaseModel):
    """Full attribute set submitted for a contact create or update.

    Fields are optional at the schema level so that blank values reach
    contact validation and come back as field errors instead of a
    request parsing failure.
    """

    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    phones_attributes: list[PhoneAttributes] = Field(default_factory=list)
