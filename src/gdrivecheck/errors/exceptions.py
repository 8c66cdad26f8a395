"""Exception hierarchy and Drive error mapping for gdrivecheck."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional


ProviderErrorKind = Literal[
    "invalid_argument",
    "auth",
    "permission",
    "quota",
    "not_found",
    "rate_limit",
    "network",
    "api",
]


class GDriveCheckError(Exception):
    """
    Base exception for gdrivecheck.

    Attributes:
        details: Optional structured information (e.g., HTTP status, reason).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidRequestError(GDriveCheckError):
    """Raised when a check request is rejected before any Drive call."""

    INVALID_PARAMETERS = "Invalid parameters"
    INVALID_TYPE = "Invalid type"
    INVALID_LINK = "Invalid link format"


class ConfigurationError(GDriveCheckError):
    """Raised when process settings are missing or invalid."""


class InvalidArgumentError(GDriveCheckError):
    """Raised when library calls get arguments they cannot use."""


class AuthError(GDriveCheckError):
    """Raised when the Drive service cannot be built for the API key."""


class ProviderError(GDriveCheckError):
    """
    Raised for any failed Drive call.

    Callers treat every provider failure alike; `kind` and `status_code`
    only say what went wrong for logging.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: ProviderErrorKind = "api",
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, details=details, cause=cause)
        self.kind = kind
        self.status_code = status_code


@dataclass(frozen=True)
class HttpErrorInfo:
    """Status, reason and message pulled out of a googleapiclient HttpError."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_QUOTA_REASONS: tuple[str, ...] = (
    "quota",
    "ratelimitexceeded",
    "dailylimitexceeded",
    "usagelimits",
)

_KIND_BY_STATUS: dict[int, ProviderErrorKind] = {
    400: "invalid_argument",
    401: "auth",
    403: "permission",
    404: "not_found",
    429: "rate_limit",
}


def classify_http_error(info: HttpErrorInfo) -> ProviderErrorKind:
    """
    Name the kind of Drive failure.

    403 is split by reason: quota and per-user rate limits are "quota".
    A 400 with reason keyInvalid means the API key was rejected.
    """
    reason = (info.reason or "").lower()
    if info.status_code == 400 and reason == "keyinvalid":
        return "auth"
    if info.status_code == 403 and any(key in reason for key in _QUOTA_REASONS):
        return "quota"
    return _KIND_BY_STATUS.get(info.status_code, "api")


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> ProviderError:
    """Build a ProviderError carrying the Drive message verbatim when present."""
    details: dict[str, Any] = {"reason": info.reason}
    if info.details:
        details.update(info.details)

    return ProviderError(
        info.message or f"HTTP error {info.status_code}",
        kind=classify_http_error(info),
        status_code=info.status_code,
        details=details,
        cause=cause,
    )
