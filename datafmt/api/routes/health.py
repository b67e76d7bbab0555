"""Liveness endpoint for the formatting service."""

from fastapi import APIRouter

from datafmt.config import VERSION

router = APIRouter()


@router.get("/health")
def health_check() -> dict:
    """Report that the service is up, with the running datafmt version."""
    return {"status": "healthy", "version": VERSION}
