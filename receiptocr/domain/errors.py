"""Domain-level errors for receipt recognition.

Nothing here is fatal to callers of the public entry points: each error is
contained at a known seam and degrades to an empty or partial result.
"""

from __future__ import annotations


class ReceiptOcrError(Exception):
    """Base error for receipt recognition failures."""


class RecognitionError(ReceiptOcrError):
    """Raised by an OCR engine when recognition of one source fails or times out."""


class RasterTransformError(ReceiptOcrError):
    """Raised when an image buffer cannot be decoded, rotated or re-encoded."""


class UnsupportedInputError(ReceiptOcrError):
    """Raised when a payload is neither text nor a readable raster buffer."""
