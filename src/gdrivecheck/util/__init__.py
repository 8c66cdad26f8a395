from .links import DriveLink, extract_id, is_folder_link, parse_link
from .mime import CATEGORY_MIME, is_supported_category, matches_category

__all__ = [
    "DriveLink",
    "extract_id",
    "is_folder_link",
    "parse_link",
    "CATEGORY_MIME",
    "is_supported_category",
    "matches_category",
]
