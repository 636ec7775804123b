from datetime import datetime as dt, timezone

from fastapi import APIRouter

from .. import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "aquaponics-charts",
        "version": __version__,
        "timestamp": dt.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }
