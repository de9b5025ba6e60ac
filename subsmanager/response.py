"""Uniform JSON envelopes for API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _plain(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


@dataclass
class APIResponse:
    """The envelope every API answer is wrapped in."""

    success: bool
    message: str
    data: Any = None
    error: str = ""

    def to_dict(self) -> dict[str, Any]:
        """The JSON body; empty data and error fields are left out."""
        body: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.data is not None:
            body["data"] = _plain(self.data)
        if self.error:
            body["error"] = self.error
        return body


def success_response(status_code: int, message: str, data: Any = None) -> tuple[dict[str, Any], int]:
    """A successful answer as a (body, status) pair."""
    return APIResponse(success=True, message=message, data=data).to_dict(), status_code


def error_response(
    status_code: int, message: str, error: BaseException | None = None
) -> tuple[dict[str, Any], int]:
    """A failed answer as a (body, status) pair, carrying the error text if any."""
    response = APIResponse(success=False, message=message)
    if error is not None:
        response.error = str(error)
    return response.to_dict(), status_code