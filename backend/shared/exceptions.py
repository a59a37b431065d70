"""
Error types shared by every module.

Modules subclass one of the bases below; api.errors turns the base into an
HTTP status and the instance into the response body.
"""

from typing import Optional, Any


class WhyNotError(Exception):
    """
    Root of the application's errors.

    ``code`` is the stable identifier clients match on; it defaults to the
    class name. ``details`` carries structured context for the response.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or type(self).__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": self.message, "details": self.details}


class ValidationError(WhyNotError):
    """Request content was rejected."""


class AuthenticationError(WhyNotError):
    """No verified identity."""


class AuthorizationError(WhyNotError):
    """Verified identity, but not allowed to do this."""


class NotFoundError(WhyNotError):
    """The addressed record does not exist."""


class ConfigurationError(WhyNotError):
    """A required setting is absent or malformed; the message names it."""
