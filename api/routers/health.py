"""Health and info endpoints."""

from fastapi import APIRouter

from api.models import HealthResponse
from content_audit.schemas import CONTENT_TYPES

router = APIRouter()

VERSION = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok", version=VERSION, content_types=CONTENT_TYPES)


@router.get("/version")
async def version():
    """Return API version."""
    return {"version": VERSION}
