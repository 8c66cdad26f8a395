"""Public error exports for gdrivecheck."""

from __future__ import annotations

from .exceptions import (
    AuthError,
    ConfigurationError,
    GDriveCheckError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidRequestError,
    ProviderError,
    ProviderErrorKind,
    classify_http_error,
    map_http_error,
)

__all__ = [
    "GDriveCheckError",
    "InvalidRequestError",
    "ConfigurationError",
    "InvalidArgumentError",
    "AuthError",
    "ProviderError",
    "ProviderErrorKind",
    "HttpErrorInfo",
    "classify_http_error",
    "map_http_error",
]
