from fastapi import APIRouter, Request

from receiptocr.core.config import get_settings
from receiptocr.core.logging import get_logger

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request):
    """Liveness check: process is up."""
    settings = get_settings()
    logger = get_logger(__name__)
    logger.info("health", extra={"path": str(request.url.path)})
    return {"status": "ok", "service": settings.APP_NAME}


@router.get("/ready")
async def ready(request: Request):
    """Readiness check: the recognizer has been built."""
    settings = get_settings()
    status = "ok" if getattr(request.app.state, "recognizer", None) is not None else "starting"
    return {"status": status, "service": settings.APP_NAME}
