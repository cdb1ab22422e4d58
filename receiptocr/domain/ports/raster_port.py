"""RasterTransform protocol for image rotation."""

from __future__ import annotations

from typing import Protocol


class RasterTransform(Protocol):
    """Rotates an encoded image clockwise by 90, 180 or 270 degrees.

    Returns a newly encoded (PNG) buffer; raises ``RasterTransformError``
    when the buffer cannot be processed.
    """

    def rotate(self, buffer: bytes, angle: int) -> bytes: ...
