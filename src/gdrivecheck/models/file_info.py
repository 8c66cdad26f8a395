"""Data model for Drive items."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class FileInfo:
    """
    A Drive item as returned by the metadata API.

    Only the fields needed for classification are requested from Drive.
    """

    file_id: str
    mime_type: str
    name: str = ""
