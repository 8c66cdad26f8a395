"""Public model exports for gdrivecheck."""

from __future__ import annotations

from .file_info import FileInfo
from .results import CheckMode, CheckResult

__all__ = [
    "FileInfo",
    "CheckMode",
    "CheckResult",
]
