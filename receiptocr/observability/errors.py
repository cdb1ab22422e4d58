from __future__ import annotations

from typing import Any

from fastapi import HTTPException


ERROR_REGISTRY: dict[str, dict[str, Any]] = {
    "UNSUPPORTED_FILE_TYPE": {
        "status": 400,
        "message": "Unsupported file type. Allowed: png, jpg, jpeg, webp, bmp, tif, tiff",
    },
    "UPLOAD_READ_FAILED": {
        "status": 400,
        "message": "Failed to read uploaded file",
    },
    "EMPTY_INPUT": {
        "status": 400,
        "message": "Provide either an image file or receipt text",
    },
    "FILE_TOO_LARGE": {
        "status": 413,
        "message": "Uploaded file exceeds the size limit",
    },
    "RECOGNIZER_UNAVAILABLE": {
        "status": 503,
        "message": "Receipt recognizer is not initialized",
    },
}


def to_http_error(code: str, *, message: str | None = None, status: int | None = None) -> HTTPException:
    meta = ERROR_REGISTRY.get(code, {"status": 500, "message": code})
    status_code = int(status or meta.get("status", 500))
    detail_msg = message or str(meta.get("message", code))
    return HTTPException(status_code=status_code, detail={"code": code, "message": detail_msg})
