"""Public config exports for gdrivecheck."""

from __future__ import annotations

from .settings import Settings, get_settings, load_settings

__all__ = ["Settings", "get_settings", "load_settings"]
