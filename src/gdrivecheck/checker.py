"""DownloadabilityChecker: resolves a Drive link against a content category."""

from __future__ import annotations

import logging
from typing import Optional

from gdrivecheck.auth import AuthInfo
from gdrivecheck.controller import GoogleDriveController
from gdrivecheck.errors import InvalidArgumentError, InvalidRequestError
from gdrivecheck.models import CheckResult, FileInfo
from gdrivecheck.util.links import DriveLink, parse_link
from gdrivecheck.util.mime import is_supported_category, matches_category

logger = logging.getLogger(__name__)


class DownloadabilityChecker:
    """Answer whether a Drive file, or any file directly in a folder, matches a category."""

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        supports_all_drives: bool = True,
        timeout: Optional[float] = None,
    ) -> None:
        self._controller = GoogleDriveController(
            auth_info,
            supports_all_drives=supports_all_drives,
            timeout=timeout,
        )

    @classmethod
    def from_controller(cls, controller: GoogleDriveController) -> "DownloadabilityChecker":
        """Create checker with an injected controller (useful for tests)."""
        obj = cls.__new__(cls)
        obj._controller = controller
        return obj

    def check(self, link: str, category: str) -> CheckResult:
        """
        Check a shareable link.

        Validation happens before any Drive call: the category first, then
        the link.

        Raises:
            InvalidRequestError: unsupported category or no identifier in link.
            GDriveCheckError: any Drive failure, unchanged.
        """
        if not is_supported_category(category):
            raise InvalidRequestError(
                InvalidRequestError.INVALID_TYPE,
                details={"type": category},
            )

        parsed = parse_link(link)
        if parsed is None:
            raise InvalidRequestError(
                InvalidRequestError.INVALID_LINK,
                details={"link": link},
            )

        return self.check_parsed(parsed, category)

    def check_parsed(self, parsed: DriveLink, category: str) -> CheckResult:
        if parsed.is_folder:
            return self.check_folder(parsed.identifier, category)
        return self.check_file(parsed.identifier, category)

    def check_file(self, file_id: str, category: str) -> CheckResult:
        _require_category(category)
        info = self._controller.get(file_id)
        downloadable = matches_category(category, info.mime_type)
        logger.debug(
            "File %s has mimeType %r (category=%s, match=%s)",
            file_id,
            info.mime_type,
            category,
            downloadable,
        )
        return CheckResult(
            downloadable=downloadable,
            mode="file",
            identifier=file_id,
            category=category,
        )

    def check_folder(self, folder_id: str, category: str) -> CheckResult:
        """
        Check the immediate children of folder_id.

        Stops at the first matching child. An empty folder is not downloadable.
        """
        _require_category(category)
        children = self._controller.list_children(folder_id)
        match = _first_match(children, category)
        logger.debug(
            "Folder %s has %d children (category=%s, match=%s)",
            folder_id,
            len(children),
            category,
            match.file_id if match else None,
        )
        return CheckResult(
            downloadable=match is not None,
            mode="folder",
            identifier=folder_id,
            category=category,
        )


def _require_category(category: str) -> None:
    if not is_supported_category(category):
        raise InvalidArgumentError(
            "Unsupported category",
            details={"category": category},
        )


def _first_match(children: list[FileInfo], category: str) -> Optional[FileInfo]:
    for child in children:
        if matches_category(category, child.mime_type):
            return child
    return None
