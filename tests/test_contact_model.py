"""Tests for the contact and phone models."""

import pytest
from sqlalchemy import func, select

from contact_directory.domain.schemas import PhoneAttributes
from contact_directory.persistence.models.contact import Contact, Phone
from contact_directory.persistence.repositories.contact_repository import ContactRepository


def test_name_joins_first_and_last_name():
    """Test that name is first name and last name separated by a space."""
    contact = Contact(firstname="Jane", lastname="Doe", email="jane@example.com")
    assert contact.name == "Jane Doe"


def test_name_follows_attribute_changes():
    """Test that name is derived, not stored."""
    contact = Contact(firstname="Jane", lastname="Doe", email="jane@example.com")
    contact.firstname = "Janet"
    contact.lastname = "Smith"
    assert contact.name == "Janet Smith"


@pytest.mark.asyncio
async def test_factory_contact_has_three_phones(contact_factory, db_session):
    """Test that a contact is persisted with its three phones."""
    contact = await contact_factory()

    stmt = select(func.count()).select_from(Phone).where(Phone.contact_id == contact.id)
    assert (await db_session.execute(stmt)).scalar_one() == 3
    assert {phone.phone_type for phone in contact.phones} == {"home", "office", "mobile"}


@pytest.mark.asyncio
async def test_name_after_replace(contact_factory, db_session):
    """Test that name tracks both fields after a full replace."""
    contact = await contact_factory(firstname="Lawrence", lastname="Smith")

    repo = ContactRepository(db_session)
    await repo.replace(
        contact,
        firstname="Larry",
        lastname="Capucha",
        email=contact.email,
        phones=[PhoneAttributes(number="555-0199", phone_type="mobile")],
    )

    reloaded = await repo.get_by_id(contact.id)
    assert reloaded.name == "Larry Capucha"


@pytest.mark.asyncio
async def test_phone_type_is_free_form(contact_factory):
    """Test that phone types outside the default three are accepted."""
    contact = await contact_factory(
        phone_list=[PhoneAttributes(number="555-0123", phone_type="pager")]
    )
    assert [phone.phone_type for phone in contact.phones] == ["pager"]
