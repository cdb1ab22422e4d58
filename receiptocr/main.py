from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from receiptocr.api.v1.routes_health import router as health_router
from receiptocr.api.v1.routes_receipts import router as receipts_router
from receiptocr.application.factories import build_recognizer, build_remote_client
from receiptocr.core.config import get_settings
from receiptocr.core.logging import RequestIdMiddleware, configure_logging, get_logger

settings = get_settings()
configure_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = get_logger(__name__)
    app.state.recognizer = build_recognizer()
    app.state.remote_client = build_remote_client()
    logger.info(
        "service_startup",
        extra={
            "env": settings.ENV,
            "log_level": settings.LOG_LEVEL,
            "remote_fallback": app.state.remote_client is not None,
        },
    )
    try:
        yield
    finally:
        logger.info("service_shutdown")


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

app.add_middleware(RequestIdMiddleware)

app.include_router(health_router)
app.include_router(receipts_router)
