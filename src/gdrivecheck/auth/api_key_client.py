"""Drive service construction for gdrivecheck."""

from __future__ import annotations

from typing import Any, Optional

from gdrivecheck.errors import AuthError, InvalidArgumentError

from .auth_info import AuthInfo


class ApiKeyClient:
    """Build Drive API service objects and HTTP transports for an API key."""

    def __init__(self, auth_info: AuthInfo, *, timeout: Optional[float] = None) -> None:
        if auth_info.kind != "api_key":
            raise InvalidArgumentError("ApiKeyClient requires AuthInfo(kind='api_key')")
        if timeout is not None and timeout <= 0:
            raise InvalidArgumentError(
                "timeout must be positive",
                details={"timeout": timeout},
            )
        self._auth_info = auth_info
        self._timeout = timeout

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def new_http(self) -> Any:
        """
        Return a fresh HTTP transport.

        httplib2.Http is not thread-safe; use one per request.

        Returns:
            httplib2.Http
        """
        import httplib2

        return httplib2.Http(timeout=self._timeout)

    def build_drive_service(self) -> Any:
        """
        Build a Drive API service resource authenticated with the API key.

        The bundled discovery document is used, so no network call is made.

        Returns:
            googleapiclient.discovery.Resource
        """
        try:
            from googleapiclient.discovery import build
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                details={"hint": "Install google-api-python-client"},
                cause=exc,
            ) from exc

        try:
            return build(
                "drive",
                "v3",
                developerKey=self._auth_info.api_key,
                http=self.new_http(),
                cache_discovery=False,
                static_discovery=True,
            )
        except Exception as exc:
            raise AuthError("Failed to build Drive service", cause=exc) from exc
