"""Results of contact actions, handed to the rendering layer."""

from dataclasses import dataclass, field

from contact_directory.domain.schemas import ContactAttributes
from contact_directory.persistence.models.contact import Contact


@dataclass(frozen=True)
class Rendered:
    """Present a view: a listing, a contact, or a form (with any errors)."""

    view: str  # 'index', 'show', 'new', 'edit'
    contact: Contact | None = None
    contacts: list[Contact] | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)
    form: ContactAttributes | None = None


@dataclass(frozen=True)
class Redirected:
    """Send the caller on to another view."""

    view: str  # 'show', 'index'
    contact_id: int | None = None


Outcome = Rendered | Redirected
