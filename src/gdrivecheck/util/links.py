"""Extract Drive identifiers from shareable links."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

FILE_ID_PATTERN: re.Pattern[str] = re.compile(r"/d/([a-zA-Z0-9_-]+)")
FOLDER_ID_PATTERN: re.Pattern[str] = re.compile(r"/folders/([a-zA-Z0-9_-]+)")
FOLDER_MARKER: str = "/folders/"


@dataclass(frozen=True, slots=True)
class DriveLink:
    """Identifier parsed out of a link plus the resolution mode it selects."""

    identifier: str
    is_folder: bool


def extract_id(link: str) -> Optional[str]:
    """
    Return the first identifier found in link, or None.

    The file pattern (``/d/<id>``) is tried before the folder pattern
    (``/folders/<id>``). The link is not decoded or normalized.
    """
    if not isinstance(link, str) or not link:
        return None

    for pattern in (FILE_ID_PATTERN, FOLDER_ID_PATTERN):
        match = pattern.search(link)
        if match:
            return match.group(1)
    return None


def is_folder_link(link: str) -> bool:
    return isinstance(link, str) and FOLDER_MARKER in link


def parse_link(link: str) -> Optional[DriveLink]:
    """
    Parse link into a DriveLink.

    Returns:
        DriveLink, or None when the link carries no identifier.
    """
    identifier = extract_id(link)
    if identifier is None:
        return None
    return DriveLink(identifier=identifier, is_folder=is_folder_link(link))
