"""
Exception types raised by the Konnect request client.

Every failure of a single call surfaces as exactly one of the three
subclasses of `KonnectError`.
"""
from typing import Any, Optional


class KonnectError(Exception):
    """Base class for Konnect API client errors."""


class KonnectAPIError(KonnectError):
    """Raised when Konnect answers with a non-2xx status."""

    def __init__(self, status_code: int, detail: Optional[str] = None, body: Any = None):
        self.status_code = status_code
        self.detail = detail
        self.body = body
        message = f"API Error (Status {status_code})"
        if detail:
            message += f": {detail}"
        super().__init__(message)

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (401, 403)


class KonnectNetworkError(KonnectError):
    """Raised when a request was sent but no response came back."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "Network Error: No response received from Kong API. "
            "Please check your network connection and API endpoint configuration."
        )


class KonnectRequestError(KonnectError):
    """Raised when a request could not be built or sent at all."""

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"Request Error: {cause}. Please check your request parameters and try again.")
