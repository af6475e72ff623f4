"""
Latch API responses.

Every response body is a JSON object with an optional "data" object and an
optional "error" object ({"code": int, "message": str}).
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .exceptions import ResponseError


@dataclass(frozen=True)
class Error:
    """Error reported by the Latch service."""

    code: int
    message: str

    def __str__(self) -> str:
        return f"E{self.code} - {self.message}"


class LatchResponse:
    """Parsed Latch API response."""

    def __init__(self, data: Optional[Dict[str, Any]] = None, error: Optional[Error] = None):
        self.data = data
        self.error = error

    @classmethod
    def from_json(cls, text: str) -> "LatchResponse":
        """
        Build a response from a raw JSON body.

        An empty body (as returned by unpair, lock, etc.) yields an empty response.

        Raises:
            ResponseError: If the body is not a JSON object
        """
        if not text or not text.strip():
            return cls()

        try:
            body = json.loads(text)
        except ValueError as e:
            raise ResponseError(f"Invalid JSON response: {e}") from e

        if not isinstance(body, dict):
            raise ResponseError(f"Expected a JSON object, got {type(body).__name__}")

        return cls.from_dict(body)

    @classmethod
    def from_dict(cls, body: Dict[str, Any]) -> "LatchResponse":
        data = body.get("data")
        if not isinstance(data, dict):
            data = None

        error = None
        err = body.get("error")
        if isinstance(err, dict) and "code" in err:
            try:
                code = int(str(err["code"]))
            except ValueError:
                code = None
            if code is not None:
                error = Error(code, str(err.get("message", "")))

        return cls(data=data, error=error)

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.data is not None:
            result["data"] = self.data
        if self.error is not None:
            result["error"] = {"code": self.error.code, "message": self.error.message}
        return result

    def __repr__(self) -> str:
        return f"LatchResponse(data={self.data!r}, error={self.error!r})"
