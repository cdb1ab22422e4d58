from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from ``RECEIPT_OCR_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="RECEIPT_OCR_", env_file=".env", extra="ignore")

    APP_NAME: str = Field(default="receipt-ocr")
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # Local Tesseract engine
    OCR_LANG: str = Field(default="eng")
    OCR_TIMEOUT_SECONDS: float = Field(default=30.0)
    TESSERACT_CMD: str | None = Field(default=None)

    # Variant search
    ROTATION_ENABLED: bool = Field(default=True)
    CONTRAST_FACTOR: float = Field(default=1.15)
    SEGMENTATION_MODES: list[int] = Field(default_factory=lambda: [6, 11])

    # Suggestion thresholds
    CONFIDENCE_THRESHOLD: float = Field(default=60.0)
    MANUAL_SCORE_THRESHOLD: float = Field(default=30.0)

    # Remote OCR fallback; unset disables it
    REMOTE_OCR_URL: str | None = Field(default=None)
    REMOTE_OCR_TIMEOUT_SECONDS: float = Field(default=30.0)
    REMOTE_OCR_VERIFY_SSL: bool = Field(default=True)

    MAX_UPLOAD_BYTES: int = Field(default=10 * 1024 * 1024)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
