"""HTTP surface for fourbar."""

from .app import create_app

__all__ = ["create_app"]
