from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from gdrivecheck.errors import InvalidArgumentError

PDF_MIME: str = "application/pdf"
IMAGE_MIME_PREFIX: str = "image/"
VIDEO_MIME_PREFIX: str = "video/"

# Documents match exactly; images and videos match by prefix.
CATEGORY_MIME: Mapping[str, str] = MappingProxyType(
    {
        "pdf": PDF_MIME,
        "image": IMAGE_MIME_PREFIX,
        "video": VIDEO_MIME_PREFIX,
    }
)

_PREFIX_CATEGORIES: frozenset[str] = frozenset({"image", "video"})


def is_supported_category(category: object) -> bool:
    """Return True if category is one of the names in CATEGORY_MIME."""
    return isinstance(category, str) and category in CATEGORY_MIME


def matches_category(category: str, mime_type: str) -> bool:
    """
    Return True if mime_type belongs to the requested category.

    Raises:
        InvalidArgumentError: if category is not a supported category name.
    """
    if not is_supported_category(category):
        raise InvalidArgumentError(
            "Unsupported category",
            details={"category": category, "supported": sorted(CATEGORY_MIME)},
        )
    if not isinstance(mime_type, str):
        return False

    expected = CATEGORY_MIME[category]
    if category in _PREFIX_CATEGORIES:
        return mime_type.startswith(expected)
    return mime_type == expected
