from __future__ import annotations

import asyncio

from receiptocr.core.logging import get_logger
from receiptocr.domain.models import ANGLES, Angle
from receiptocr.domain.ports.raster_port import RasterTransform

logger = get_logger(__name__)


class OrientationVariantGenerator:
    """Produces rotated, contrast-boosted copies of a receipt image.

    Without a raster transform only the original orientation is offered.
    A failed rotation yields the original buffer so there is always
    something to recognize.
    """

    def __init__(self, raster: RasterTransform | None) -> None:
        self._raster = raster

    @property
    def angles(self) -> tuple[Angle, ...]:
        return ANGLES if self._raster is not None else (0,)

    async def rotate(self, buffer: bytes, angle: Angle) -> bytes:
        if angle == 0 or self._raster is None:
            return buffer
        try:
            return await asyncio.to_thread(self._raster.rotate, buffer, angle)
        except Exception:
            logger.warning("rotation_failed", exc_info=True, extra={"angle": angle})
            return buffer
