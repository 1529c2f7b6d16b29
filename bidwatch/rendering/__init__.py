"""Text rendering of search results."""

from .templates import RenderError, ResultRenderer

__all__ = ["ResultRenderer", "RenderError"]
