"""Google Drive API controller (internal use only)."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional

from gdrivecheck.auth import ApiKeyClient, AuthInfo
from gdrivecheck.errors import (
    HttpErrorInfo,
    InvalidArgumentError,
    ProviderError,
    map_http_error,
)
from gdrivecheck.models import FileInfo

from .fields import FILE_FIELDS, LIST_FIELDS

logger = logging.getLogger(__name__)


class GoogleDriveController:
    """
    Read-only Drive metadata controller (internal only).

    Notes:
        - The Drive `service` object is NOT exposed.
        - `supports_all_drives` is applied to all requests consistently.
        - Requests are never retried; the first failure is mapped and raised.
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        supports_all_drives: bool = True,
        timeout: Optional[float] = None,
    ) -> None:
        client = ApiKeyClient(auth_info, timeout=timeout)
        self._supports_all_drives = supports_all_drives
        self._service = client.build_drive_service()
        self._http_factory: Optional[Callable[[], Any]] = client.new_http

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        supports_all_drives: bool = True,
        http_factory: Optional[Callable[[], Any]] = None,
    ) -> "GoogleDriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._supports_all_drives = supports_all_drives
        obj._service = service
        obj._http_factory = http_factory
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    def get(self, file_id: str) -> FileInfo:
        _require_id(file_id, "file_id")
        req = self._service.files().get(
            fileId=file_id,
            fields=FILE_FIELDS,
            **self._common_get_kwargs(),
        )
        data = self._execute(req)
        return _file_dict_to_file_info(data)

    def list_children(self, parent_id: str) -> list[FileInfo]:
        """
        List the immediate children of parent_id.

        Only the first page returned by Drive is read and subfolders are not
        descended into. Trashed children are listed too.
        """
        _require_id(parent_id, "parent_id")
        req = self._service.files().list(
            q=_build_parent_query(parent_id),
            fields=LIST_FIELDS,
            **self._common_list_kwargs(),
        )
        data = self._execute(req)
        files = data.get("files", []) if isinstance(data, dict) else []
        return [_file_dict_to_file_info(f) for f in files if isinstance(f, dict)]

    # ----------------------------
    # Internals
    # ----------------------------
    def _common_get_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _common_list_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True, "includeItemsFromAllDrives": True}

    def _execute(self, request: Any) -> Any:
        try:
            if self._http_factory is None:
                return request.execute()
            return request.execute(http=self._http_factory())
        except Exception as exc:
            mapped = self._map_exception(exc)
            logger.debug("Drive request failed (%s): %s", mapped.kind, mapped)
            raise mapped from exc

    def _map_exception(self, exc: Exception) -> ProviderError:
        try:
            from googleapiclient.errors import HttpError
        except Exception:  # pragma: no cover
            HttpError = None  # type: ignore[assignment]

        if HttpError is not None and isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        detail = str(exc) or type(exc).__name__
        if isinstance(exc, (OSError, TimeoutError)):
            return ProviderError(f"Network error: {detail}", kind="network", cause=exc)

        return ProviderError(f"Drive API error: {detail}", cause=exc)


def _require_id(value: Any, name: str) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(f"{name} must be a non-empty string")


def _build_parent_query(parent_id: str) -> str:
    return f"'{parent_id}' in parents"


def _file_dict_to_file_info(data: dict[str, Any]) -> FileInfo:
    file_id = data.get("id")
    name = data.get("name", "")
    mime_type = data.get("mimeType", "")

    return FileInfo(
        file_id=file_id if isinstance(file_id, str) else "",
        mime_type=mime_type if isinstance(mime_type, str) else "",
        name=name if isinstance(name, str) else "",
    )


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            payload = None
        err = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        try:
            status_code = int(status_code)
        except (TypeError, ValueError):
            status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message if isinstance(message, str) else None,
        details=details or None,
    )
