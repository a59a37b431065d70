"""
Service-account credential parsing.

The service-account blob arrives through an environment variable and is a
frequent source of misconfiguration: secret managers and dashboards sometimes
store it with an extra layer of quoting. Parsing is a pure function so it can
be tested without touching the network.
"""

import json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from .exceptions import ConfigurationError


REQUIRED_FIELDS = ("type", "project_id", "private_key")

_QUOTES = ('"', "'")


class CredentialErrorReason(str, Enum):
    """Why a credential blob was rejected."""

    MISSING = "missing"
    INVALID_JSON = "invalid_json"
    UNWRAP_FAILED = "unwrap_failed"
    NOT_AN_OBJECT = "not_an_object"
    MISSING_FIELDS = "missing_fields"


class CredentialError(ConfigurationError):
    """Raised when the service-account credential cannot be used."""

    def __init__(
        self,
        reason: CredentialErrorReason,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            f"SERVICE_ACCOUNT_JSON: {message}",
            code="INVALID_SERVICE_CREDENTIAL",
            details={"reason": reason.value, **(details or {})},
        )
        self.reason = reason


class ServiceCredential(BaseModel):
    """
    A validated service-account credential.

    Only the fields the backend relies on are declared; everything else in
    the blob (client_email, token_uri, ...) is kept as extra data.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str
    project_id: str
    private_key: str


def _unwrap(raw: str) -> Optional[str]:
    """Strip one matching pair of surrounding quotes, or return None."""
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in _QUOTES:
        return raw[1:-1].replace('\\"', '"')
    return None


def _parse(raw: str) -> Any:
    """
    Parse the blob, allowing a single unwrap.

    A blob that was JSON-encoded twice parses to a string on the first
    attempt; that string is decoded once more. A blob wrapped in bare quotes
    fails the first attempt and is unwrapped and re-parsed.
    """
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as first_error:
        inner = _unwrap(raw)
        if inner is None:
            raise CredentialError(
                CredentialErrorReason.INVALID_JSON,
                f"not valid JSON ({first_error})",
            )
        try:
            return json.loads(inner)
        except json.JSONDecodeError as second_error:
            raise CredentialError(
                CredentialErrorReason.UNWRAP_FAILED,
                f"not valid JSON ({first_error}); "
                f"still invalid after removing surrounding quotes ({second_error})",
            )

    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError as second_error:
            raise CredentialError(
                CredentialErrorReason.UNWRAP_FAILED,
                f"decoded to a string that is not valid JSON ({second_error})",
            )
    return value


def load_service_credential(raw: Optional[str]) -> ServiceCredential:
    """
    Parse and validate a service-account credential blob.

    Args:
        raw: The credential as stored in configuration.

    Returns:
        ServiceCredential with the required fields present.

    Raises:
        CredentialError: If the blob is absent, unparseable, not an object,
            or lacks any of the required fields.
    """
    if raw is None or not raw.strip():
        raise CredentialError(CredentialErrorReason.MISSING, "not set")

    value = _parse(raw.strip())

    if not isinstance(value, dict):
        raise CredentialError(
            CredentialErrorReason.NOT_AN_OBJECT,
            f"expected a JSON object, got {type(value).__name__}",
        )

    missing = [name for name in REQUIRED_FIELDS if not value.get(name)]
    if missing:
        raise CredentialError(
            CredentialErrorReason.MISSING_FIELDS,
            f"missing required fields: {', '.join(missing)}",
            details={"missing": missing},
        )

    return ServiceCredential(**value)
