"""Module: responses."""

from datetime import UTC, datetime

from fastapi.encoders import jsonable_encoder


# Standard success envelope shared by every vaccination endpoint.
def envelope(data, message: str | None = None) -> dict:
    body = {
        "success": True,
        "data": jsonable_encoder(data),
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if message:
        body["message"] = message
    return body


# Error body for 4xx/5xx responses; `details` carries itemized reasons.
def error_body(error: str, message: str, details: list[str] | None = None, **extra) -> dict:
    body = {"success": False, "error": error, "message": message}
    if details:
        body["details"] = details
    body.update(extra)
    return body
