"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from contact_directory.api.middleware import RequestContextMiddleware
from contact_directory.api.routes import api_router
from contact_directory.domain.exceptions import NotFound, Unauthorized
from contact_directory.logging_config import setup_logging
from contact_directory.persistence.database import create_tables, engine
from contact_directory.settings import settings

# Setup logging
setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    if settings.create_tables_on_startup:
        logger.info("Creating database tables")
        await create_tables()
    yield
    # Shutdown
    await engine.dispose()


# Create FastAPI app
app = FastAPI(
    title="Contact Directory API",
    description="Contact directory with public browsing and signed-in editing",
    version="0.1.0",
    lifespan=lifespan,
)

# Add request context middleware
app.add_middleware(RequestContextMiddleware)

# Include API routes
app.include_router(api_router, prefix=settings.api_v1_prefix)


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
    """Render a missing contact as a 404."""
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(Unauthorized)
async def unauthorized_handler(request: Request, exc: Unauthorized) -> RedirectResponse:
    """Send callers without the required session to the login entry point."""
    return RedirectResponse(url=exc.login_url, status_code=status.HTTP_303_SEE_OTHER)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
