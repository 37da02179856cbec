from datetime import datetime, timezone

from fastapi import APIRouter

from inventory_api.config import settings
from inventory_api.db import ping

router = APIRouter()


@router.get("/health", tags=["health"])
def health():
    db_ok = ping()
    return {
        "status": "ok" if db_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "db": db_ok,
    }


@router.get("/", tags=["health"])
def index():
    return {
        "message": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "endpoints": {"products": "/api/products", "health": "/health"},
    }
