"""
Errors raised by the GUPay client.

Two kinds of failure reach the caller:

  - ``GUPayAPIError``: the provider answered with its structured error body
    ``{"error": {"code", "message", "type"}}``. The three fields are kept
    unmodified so callers can branch on ``code`` or ``type``.
  - ``GUPayUnexpectedError``: anything else (network failure, timeout,
    non-JSON body, provider outage). Carries a fixed message only.

Both derive from ``GUPayError`` so a single ``except`` can catch either.
"""

from typing import Optional

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while creating the charge"


class GUPayError(Exception):
    """Base exception for GUPay client failures."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class GUPayAPIError(GUPayError):
    """Error reported by the provider in its structured error body."""

    def __init__(
        self,
        code: str,
        message: str,
        type: str,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, status_code=status_code)
        self.code = code
        self.type = type

    def __repr__(self) -> str:
        return (
            f"GUPayAPIError(code={self.code!r}, message={self.message!r}, "
            f"type={self.type!r}, status_code={self.status_code!r})"
        )


class GUPayUnexpectedError(GUPayError):
    """Failure that did not carry a provider error body."""

    def __init__(self, status_code: Optional[int] = None):
        super().__init__(UNEXPECTED_ERROR_MESSAGE, status_code=status_code)
