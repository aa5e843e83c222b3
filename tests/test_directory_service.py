"""Tests for directory listing by letter."""

import pytest

from contact_directory.domain.services.directory_service import DirectoryService


@pytest.fixture
async def people(contact_factory):
    """Smith, Jones and Johnson, created out of order."""
    smith = await contact_factory(lastname="Smith")
    jones = await contact_factory(lastname="Jones")
    johnson = await contact_factory(lastname="Johnson")
    return smith, jones, johnson


@pytest.mark.asyncio
async def test_matching_letter_returns_sorted_matches(db_session, people):
    """Test that filtering by 'J' returns Johnson then Jones."""
    smith, jones, johnson = people

    contacts = await DirectoryService(db_session).list_contacts("J")

    assert [c.id for c in contacts] == [johnson.id, jones.id]
    assert smith.id not in [c.id for c in contacts]


@pytest.mark.asyncio
async def test_letter_match_is_case_insensitive(db_session, people):
    """Test that a lowercase letter matches capitalized last names."""
    smith, jones, johnson = people

    contacts = await DirectoryService(db_session).list_contacts("j")

    assert [c.id for c in contacts] == [johnson.id, jones.id]


@pytest.mark.asyncio
async def test_letter_match_is_case_insensitive_beyond_ascii(db_session, contact_factory):
    """Test that accented letters match last names in either case."""
    emile = await contact_factory(lastname="émile")
    ozil = await contact_factory(lastname="Özil")
    await contact_factory(lastname="Evans")

    service = DirectoryService(db_session)

    assert [c.id for c in await service.list_contacts("É")] == [emile.id]
    assert [c.id for c in await service.list_contacts("é")] == [emile.id]
    assert [c.id for c in await service.list_contacts("ö")] == [ozil.id]


@pytest.mark.asyncio
async def test_no_filter_returns_everyone_sorted(db_session, people):
    """Test that listing without a letter returns all contacts by last name."""
    smith, jones, johnson = people

    for letter in (None, ""):
        contacts = await DirectoryService(db_session).list_contacts(letter)
        assert [c.id for c in contacts] == [johnson.id, jones.id, smith.id]


@pytest.mark.asyncio
async def test_first_name_breaks_last_name_ties(db_session, contact_factory):
    """Test that contacts sharing a last name are ordered by first name."""
    zoe = await contact_factory(firstname="Zoe", lastname="Smith")
    adam = await contact_factory(firstname="Adam", lastname="Smith")

    contacts = await DirectoryService(db_session).list_contacts("S")

    assert [c.id for c in contacts] == [adam.id, zoe.id]


@pytest.mark.asyncio
async def test_letter_is_a_prefix_test_not_a_substring_search(db_session, contact_factory):
    """Test that only the first character of the last name is matched."""
    await contact_factory(lastname="Bajwa")

    assert await DirectoryService(db_session).list_contacts("j") == []


@pytest.mark.asyncio
async def test_no_matches_is_empty(db_session, people):
    """Test that a letter with no matches yields an empty list."""
    assert await DirectoryService(db_session).list_contacts("Q") == []


@pytest.mark.asyncio
async def test_empty_directory(db_session):
    """Test listing an empty directory."""
    assert await DirectoryService(db_session).list_contacts() == []


@pytest.mark.asyncio
async def test_multi_character_filter_rejected(db_session):
    """Test that the letter filter must be a single character."""
    with pytest.raises(ValueError):
        await DirectoryService(db_session).list_contacts("Jo")
