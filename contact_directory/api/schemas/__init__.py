"""API schemas package."""

from contact_directory.api.schemas.contact import (
    ContactFormErrorResponse,
    ContactResponse,
    ContactsListResponse,
    PhoneResponse,
)
