"""Contact validation rules."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from contact_directory.domain.schemas import ContactAttributes

if TYPE_CHECKING:
    from contact_directory.persistence.repositories.contact_repository import ContactRepository

BLANK = "can't be blank"
TAKEN = "has already been taken"

REQUIRED_FIELDS = ("firstname", "lastname", "email")


@dataclass
class ValidationResult:
    """Field errors collected for a candidate contact."""

    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, field_name: str, message: str) -> None:
        self.errors.setdefault(field_name, []).append(message)


def is_blank(value: str | None) -> bool:
    """Check for a missing, empty, or whitespace-only value."""
    return value is None or not value.strip()


async def validate_contact(
    repository: "ContactRepository",
    attributes: ContactAttributes,
    exclude_id: int | None = None,
) -> ValidationResult:
    """Validate a candidate contact against the persisted directory.

    Every rule is evaluated; errors accumulate per field.

    Args:
        repository: Contact repository used for the email uniqueness check
        attributes: Candidate attribute set
        exclude_id: Id of the contact being updated, if any

    Returns:
        Validation result with any field errors
    """
    result = ValidationResult()

    for field_name in REQUIRED_FIELDS:
        if is_blank(getattr(attributes, field_name)):
            result.add(field_name, BLANK)

    if not is_blank(attributes.email):
        if await repository.email_taken(attributes.email, exclude_id=exclude_id):
            result.add("email", TAKEN)

    return result
