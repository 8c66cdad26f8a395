"""gdrivecheck public API."""

from __future__ import annotations

from gdrivecheck.auth import ApiKeyClient, AuthInfo
from gdrivecheck.checker import DownloadabilityChecker
from gdrivecheck.errors import (
    AuthError,
    ConfigurationError,
    GDriveCheckError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidRequestError,
    ProviderError,
    map_http_error,
)
from gdrivecheck.models import CheckResult, FileInfo
from gdrivecheck.util import CATEGORY_MIME, DriveLink, matches_category, parse_link

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # High-level
    "DownloadabilityChecker",
    # Auth
    "AuthInfo",
    "ApiKeyClient",
    # Models / parsing
    "CheckResult",
    "FileInfo",
    "DriveLink",
    "parse_link",
    "CATEGORY_MIME",
    "matches_category",
    # Errors
    "GDriveCheckError",
    "InvalidRequestError",
    "ConfigurationError",
    "AuthError",
    "InvalidArgumentError",
    "ProviderError",
    "HttpErrorInfo",
    "map_http_error",
]
