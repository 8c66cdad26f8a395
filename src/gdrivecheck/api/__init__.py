"""HTTP surface for gdrivecheck."""

from .app import build_checker, create_app
from .routes import router

__all__ = ["build_checker", "create_app", "router"]
