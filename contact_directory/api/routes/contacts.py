"""Contacts API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from contact_directory.api.deps import get_identity
from contact_directory.api.schemas.contact import (
    ContactFormErrorResponse,
    ContactResponse,
    ContactsListResponse,
    PhoneResponse,
)
from contact_directory.core.identity import SessionIdentity
from contact_directory.domain.outcomes import Outcome, Redirected, Rendered
from contact_directory.domain.schemas import ContactAttributes
from contact_directory.domain.services.contact_service import ContactService
from contact_directory.persistence.database import get_db
from contact_directory.persistence.models.contact import Contact

router = APIRouter()


# ============== Helper Functions ==============

def _contact_to_response(contact: Contact) -> ContactResponse:
    """Convert a contact model to response."""
    persisted = contact.id is not None
    return ContactResponse(
        id=contact.id,
        firstname=contact.firstname,
        lastname=contact.lastname,
        name=contact.name if persisted else None,
        email=contact.email,
        phones=[PhoneResponse.model_validate(phone) for phone in contact.phones],
        created_at=contact.created_at.isoformat() if contact.created_at else None,
    )


def _redirect(request: Request, outcome: Redirected) -> RedirectResponse:
    """Resolve a redirect outcome to a URL on this router."""
    if outcome.view == "show":
        url = request.url_for("show_contact", contact_id=outcome.contact_id)
    else:
        url = request.url_for("list_contacts")
    return RedirectResponse(url=str(url), status_code=status.HTTP_303_SEE_OTHER)


def _form_errors(outcome: Rendered) -> JSONResponse:
    """Re-present a form with its field errors and the submitted input."""
    body = ContactFormErrorResponse(
        view=outcome.view,
        errors=outcome.errors,
        contact=outcome.form or ContactAttributes(),
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=body.model_dump(),
    )


def _respond(request: Request, outcome: Outcome) -> Response:
    if isinstance(outcome, Redirected):
        return _redirect(request, outcome)
    return _form_errors(outcome)


# ============== Contact CRUD Endpoints ==============

@router.get("", response_model=ContactsListResponse, name="list_contacts")
async def list_contacts(
    db: Annotated[AsyncSession, Depends(get_db)],
    identity: Annotated[SessionIdentity, Depends(get_identity)],
    letter: str | None = Query(None, max_length=1),
) -> ContactsListResponse:
    """List contacts, optionally filtered by the first letter of the last name."""
    outcome = await ContactService(db).index(identity, letter)
    return ContactsListResponse(
        contacts=[_contact_to_response(contact) for contact in outcome.contacts],
        total=len(outcome.contacts),
    )


@router.get("/new", response_model=ContactResponse)
async def new_contact(
    db: Annotated[AsyncSession, Depends(get_db)],
    identity: Annotated[SessionIdentity, Depends(get_identity)],
) -> ContactResponse:
    """Get an empty contact template with home, office and mobile phone slots."""
    outcome = await ContactService(db).new(identity)
    return _contact_to_response(outcome.contact)


@router.post("")
async def create_contact(
    request: Request,
    contact: Annotated[ContactAttributes, Body(embed=True)],
    db: Annotated[AsyncSession, Depends(get_db)],
    identity: Annotated[SessionIdentity, Depends(get_identity)],
) -> Response:
    """Create a contact with its phones."""
    outcome = await ContactService(db).create(identity, contact)
    return _respond(request, outcome)


@router.get("/{contact_id}", response_model=ContactResponse, name="show_contact")
async def show_contact(
    contact_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    identity: Annotated[SessionIdentity, Depends(get_identity)],
) -> ContactResponse:
    """Get a specific contact by ID."""
    outcome = await ContactService(db).show(identity, contact_id)
    return _contact_to_response(outcome.contact)


@router.get("/{contact_id}/edit", response_model=ContactResponse)
async def edit_contact(
    contact_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    identity: Annotated[SessionIdentity, Depends(get_identity)],
) -> ContactResponse:
    """Get a contact for editing."""
    outcome = await ContactService(db).edit(identity, contact_id)
    return _contact_to_response(outcome.contact)


@router.api_route("/{contact_id}", methods=["PUT", "PATCH"])
async def update_contact(
    request: Request,
    contact_id: int,
    contact: Annotated[ContactAttributes, Body(embed=True)],
    db: Annotated[AsyncSession, Depends(get_db)],
    identity: Annotated[SessionIdentity, Depends(get_identity)],
) -> Response:
    """Replace a contact's fields and phones."""
    outcome = await ContactService(db).update(identity, contact_id, contact)
    return _respond(request, outcome)


@router.delete("/{contact_id}")
async def delete_contact(
    request: Request,
    contact_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    identity: Annotated[SessionIdentity, Depends(get_identity)],
) -> Response:
    """Delete a contact and its phones."""
    outcome = await ContactService(db).destroy(identity, contact_id)
    return _redirect(request, outcome)
