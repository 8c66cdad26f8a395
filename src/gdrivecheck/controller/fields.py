"""Field definitions for Google Drive API responses."""

from __future__ import annotations

FILE_FIELDS: str = "id,name,mimeType"

# First page only; nextPageToken is intentionally not requested.
LIST_FIELDS: str = f"files({FILE_FIELDS})"
