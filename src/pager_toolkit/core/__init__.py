"""
Page Geometry Core Package

Shared value types for the layout and output modules. Every model here is
immutable: a margin change or a restored state is a new instance, never an
edit of an old one.
"""

from .models import (
    FloatSide,
    HorizontalBounds,
    MarginBox,
    MarginSnapshot,
    MarginState,
    PageBackground,
    StateOrigin,
)

__all__ = [
    "FloatSide",
    "HorizontalBounds",
    "MarginBox",
    "MarginSnapshot",
    "MarginState",
    "PageBackground",
    "StateOrigin",
]
