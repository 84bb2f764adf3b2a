from __future__ import annotations

from typing import Optional


class APIError(Exception):
    """Error returned by (or while calling) the AIRS API.

    Raised once per failed call, for both non‑2xx responses and requests that
    never got a response. The latter always carry ``status_code=500``.
    """

    def __init__(self, status_code: int, message: str, details: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        self.details = details or None
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return f"airs api error: status={self.status_code} message={self.message}"
        return (
            f"airs api error: status={self.status_code} message={self.message} "
            f"details={self.details}"
        )


class BatchSizeError(ValueError):
    """Raised before dispatch when an ID batch is empty or too large.

    Nothing is sent to AIRS when this is raised.
    """
