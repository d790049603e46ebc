"""High-level clients."""

from .canvas import Canvas

__all__ = ["Canvas"]
