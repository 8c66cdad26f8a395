"""Public auth exports for gdrivecheck."""

from __future__ import annotations

from .api_key_client import ApiKeyClient
from .auth_info import AuthInfo

__all__ = ["AuthInfo", "ApiKeyClient"]
