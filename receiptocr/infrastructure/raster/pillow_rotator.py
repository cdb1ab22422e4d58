from __future__ import annotations

import io

from PIL import Image, ImageEnhance

from receiptocr.domain.errors import RasterTransformError

# Clockwise rotation expressed as Pillow transposes (which turn counter-clockwise).
_TRANSPOSE = {
    90: Image.Transpose.ROTATE_270,
    180: Image.Transpose.ROTATE_180,
    270: Image.Transpose.ROTATE_90,
}


class PillowRotator:
    """RasterTransform that rotates, boosts contrast and re-encodes as PNG."""

    def __init__(self, contrast: float = 1.15) -> None:
        self.contrast = contrast

    def _enhance_contrast(self, image: Image.Image) -> Image.Image:
        if self.contrast != 1.0:
            return ImageEnhance.Contrast(image).enhance(self.contrast)
        return image

    def rotate(self, buffer: bytes, angle: int) -> bytes:
        if angle not in _TRANSPOSE:
            raise RasterTransformError(f"Unsupported rotation angle: {angle}")
        try:
            with Image.open(io.BytesIO(buffer)) as image:
                if image.mode not in ("RGB", "L"):
                    image = image.convert("RGB")
                rotated = self._enhance_contrast(image.transpose(_TRANSPOSE[angle]))
                out = io.BytesIO()
                rotated.save(out, "PNG", compress_level=1)
                return out.getvalue()
        except Exception as exc:
            raise RasterTransformError(f"Failed to rotate image by {angle}: {exc}") from exc
