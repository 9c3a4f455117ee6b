"""
Module: bounds

Purpose:
    Provides the HorizontalBounds dataclass - the usable horizontal span
    at a given row of the page - and the FloatSide enum naming which edge
    of that span a floated box pushes inward.

Key Classes:
    - HorizontalBounds: [left, right] span in millimetres
    - FloatSide: LEFT / RIGHT anchor of a floated box

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - layout.float_margins.FloatMarginMap
    - layout.pager.Pager
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class FloatSide(str, Enum):
    """
    Edge of the content span a floated box is anchored to.

    Values are the CSS keywords so callers can pass ``"left"`` or
    ``"right"`` straight from a computed style.

    Example:
        >>> FloatSide("left") is FloatSide.LEFT
        True
    """

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class HorizontalBounds:
    """
    Usable horizontal span at a row of the page.

    Both edges are absolute x-coordinates in millimetres measured from the
    left edge of the page, so the right edge is ``page_width - right_margin``
    rather than the margin itself.

    Attributes:
        left: X-coordinate of the left boundary
        right: X-coordinate of the right boundary

    Example:
        >>> bounds = HorizontalBounds(10.0, 190.0)
        >>> bounds.width
        180.0
        >>> left, right = bounds
    """

    left: float
    right: float

    @property
    def width(self) -> float:
        """Width of the span (may be negative for degenerate floats)."""
        return self.right - self.left

    def is_narrower_left(self, x: float) -> bool:
        """True when a left float reaching ``x`` pushes this left edge inward."""
        return self.left < x

    def is_narrower_right(self, x: float) -> bool:
        """True when a right float starting at ``x`` pulls this right edge inward."""
        return self.right > x

    def __iter__(self) -> Iterator[float]:
        yield self.left
        yield self.right

    def __repr__(self) -> str:
        return f"HorizontalBounds({self.left:g}, {self.right:g})"
