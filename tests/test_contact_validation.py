"""Tests for contact validation."""

import pytest

from contact_directory.domain.schemas import ContactAttributes
from contact_directory.domain.validation import BLANK, TAKEN, validate_contact
from contact_directory.persistence.repositories.contact_repository import ContactRepository


def _attributes(**overrides) -> ContactAttributes:
    data = {"firstname": "Larry", "lastname": "Capucha", "email": "larry@example.com"}
    data.update(overrides)
    return ContactAttributes(**data)


@pytest.mark.asyncio
async def test_valid_attributes(db_session):
    """Test that complete attributes with a fresh email are valid."""
    result = await validate_contact(ContactRepository(db_session), _attributes())
    assert result.is_valid
    assert result.errors == {}


@pytest.mark.asyncio
@pytest.mark.parametrize("field_name", ["firstname", "lastname", "email"])
@pytest.mark.parametrize("blank", [None, "", "   "])
async def test_blank_required_field(db_session, field_name, blank):
    """Test that each required field rejects missing and blank values."""
    attributes = _attributes(**{field_name: blank})

    result = await validate_contact(ContactRepository(db_session), attributes)

    assert not result.is_valid
    assert result.errors == {field_name: [BLANK]}


@pytest.mark.asyncio
async def test_errors_accumulate_across_fields(db_session):
    """Test that every rule is checked rather than stopping at the first failure."""
    attributes = ContactAttributes()

    result = await validate_contact(ContactRepository(db_session), attributes)

    assert result.errors == {
        "firstname": [BLANK],
        "lastname": [BLANK],
        "email": [BLANK],
    }


@pytest.mark.asyncio
async def test_email_already_taken(db_session, contact_factory):
    """Test that an email used by a persisted contact is rejected."""
    await contact_factory(email="taken@example.com")

    result = await validate_contact(
        ContactRepository(db_session), _attributes(email="taken@example.com")
    )

    assert result.errors == {"email": [TAKEN]}


@pytest.mark.asyncio
async def test_taken_email_and_blank_name_both_reported(db_session, contact_factory):
    """Test that uniqueness is checked alongside presence."""
    await contact_factory(email="taken@example.com")

    result = await validate_contact(
        ContactRepository(db_session), _attributes(firstname="", email="taken@example.com")
    )

    assert result.errors == {"firstname": [BLANK], "email": [TAKEN]}


@pytest.mark.asyncio
async def test_own_email_allowed_on_update(db_session, contact_factory):
    """Test that the contact being updated does not collide with itself."""
    contact = await contact_factory(email="me@example.com")

    result = await validate_contact(
        ContactRepository(db_session), _attributes(email="me@example.com"), exclude_id=contact.id
    )

    assert result.is_valid


@pytest.mark.asyncio
async def test_email_match_is_exact(db_session, contact_factory):
    """Test that emails differing only in case are distinct."""
    await contact_factory(email="someone@example.com")

    result = await validate_contact(
        ContactRepository(db_session), _attributes(email="Someone@example.com")
    )

    assert result.is_valid


@pytest.mark.asyncio
async def test_phones_are_not_validated(db_session):
    """Test that nested phone attributes are accepted as submitted."""
    attributes = _attributes(phones_attributes=[{"number": None, "phone_type": "fax"}])

    result = await validate_contact(ContactRepository(db_session), attributes)

    assert result.is_valid
