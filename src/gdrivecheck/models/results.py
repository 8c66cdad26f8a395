"""Result model for downloadability checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


CheckMode = Literal["file", "folder"]


@dataclass(slots=True)
class CheckResult:
    """Outcome of a single check."""

    downloadable: bool
    mode: CheckMode
    identifier: str
    category: str

    @property
    def answer(self) -> str:
        return "yes" if self.downloadable else "no"
