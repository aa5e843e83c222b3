"""API routes."""

from fastapi import APIRouter

from contact_directory.api.routes import contacts

api_router = APIRouter()

# List and show are public; the access policy guards the rest
api_router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
