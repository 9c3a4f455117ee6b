"""
Core data models for page geometry.

Exports:
    - HorizontalBounds: usable [left, right] span at a row
    - FloatSide: side a floated box is anchored to
    - MarginBox: left/top/right/bottom margin quadruple
    - PageBackground: per-page background descriptor
    - MarginState, StateOrigin: margin state stack frames
    - MarginSnapshot: full page geometry snapshot
"""

from .bounds import FloatSide, HorizontalBounds
from .margins import MarginBox, PageBackground
from .state import MarginSnapshot, MarginState, StateOrigin

__all__ = [
    "FloatSide",
    "HorizontalBounds",
    "MarginBox",
    "PageBackground",
    "MarginSnapshot",
    "MarginState",
    "StateOrigin",
]
