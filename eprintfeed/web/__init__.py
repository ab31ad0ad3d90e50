"""Web presentation of the feed store."""

from .app import create_app
from .atom import render_atom

__all__ = ["create_app", "render_atom"]
