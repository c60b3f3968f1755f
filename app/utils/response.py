"""JSON envelopes for the health check and for every error body."""
from typing import Any


def success_response(data: Any = None, message: str | None = None) -> dict:
    return {"status": "success", "data": data, "message": message}


def error_response(message: str, messages: list[str] | None = None) -> dict:
    """``messages`` carries the per-field list of a validation failure."""
    return {"status": "error", "data": messages, "message": message}
