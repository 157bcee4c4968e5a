"""
Health check endpoint.
"""

from fastapi import APIRouter

from app.services.checks.registry import CHECKS

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Basic health check."""
    return {"status": "ok", "checks": len(CHECKS)}
