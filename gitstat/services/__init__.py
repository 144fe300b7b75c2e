"""Service layer - composes git access and rendering."""

from .status_line import build_status_line

__all__ = ["build_status_line"]
