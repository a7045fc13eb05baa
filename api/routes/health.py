"""Health check endpoints."""

from fastapi import APIRouter

from glyeral import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check."""
    return {"status": "healthy", "service": "glyeral"}


@router.get("/")
async def root():
    """API root."""
    return {
        "name": "GLYERAL Recommendation API",
        "version": __version__,
        "docs": "/docs",
    }
