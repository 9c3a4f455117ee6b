"""
Module: margins

Purpose:
    Margin quadruples and the per-page background descriptor whose insets
    are added on top of the default page margins.

Key Classes:
    - MarginBox: left/top/right/bottom margins in millimetres
    - PageBackground: fill colour, background image and margin insets

Dependencies:
    - dataclasses (std)

Used By:
    - layout.margins.MarginRegisters
    - layout.pager.Pager (background drawing)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

# RGB triple (0-255) or a colour name understood by the drawing surface
ColorSpec = Union[Tuple[int, int, int], str]


@dataclass(frozen=True, slots=True)
class MarginBox:
    """
    Four page margins in millimetres.

    Attributes:
        left: Left margin
        top: Top margin
        right: Right margin
        bottom: Bottom margin

    Invariants:
        - every side >= 0

    Example:
        >>> MarginBox(10, 10, 10, 8) + MarginBox(5, 0, 5, 0)
        MarginBox(left=15, top=10, right=15, bottom=8)
    """

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    def __post_init__(self) -> None:
        """Validate margins on construction."""
        for side in ("left", "top", "right", "bottom"):
            value = getattr(self, side)
            if value < 0:
                raise ValueError(f"{side} margin must be >= 0: {value}")

    def __add__(self, other: MarginBox) -> MarginBox:
        return MarginBox(
            left=self.left + other.left,
            top=self.top + other.top,
            right=self.right + other.right,
            bottom=self.bottom + other.bottom,
        )


@dataclass(frozen=True)
class PageBackground:
    """
    Background descriptor for a page.

    The inset fields widen the page margins for as long as the background
    is active; the colour and image are painted by the pager before the
    header and footer hooks run.

    Attributes:
        color: Fill colour for the whole page, or None
        image: Path of a background image, or None
        pos_x: Image x-position in millimetres
        pos_y: Image y-position in millimetres
        width: Image width in millimetres (None = natural size)
        left: Extra left margin while this background is active
        top: Extra top margin
        right: Extra right margin
        bottom: Extra bottom margin
    """

    color: Optional[ColorSpec] = None
    image: Optional[str] = None
    pos_x: float = 0.0
    pos_y: float = 0.0
    width: Optional[float] = None
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @property
    def insets(self) -> MarginBox:
        """Margin contribution of this background."""
        return MarginBox(self.left, self.top, self.right, self.bottom)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PageBackground:
        """
        Build from the mapping shape produced by the CSS layer.

        Accepts both the snake_case field names and the legacy keys
        ``img``, ``posX`` and ``posY``. Missing keys fall back to the
        dataclass defaults.

        Args:
            data: Mapping describing the background

        Returns:
            PageBackground instance
        """
        color = data.get("color")
        if isinstance(color, list):
            color = tuple(color)
        return cls(
            color=color or None,
            image=data.get("image", data.get("img")) or None,
            pos_x=data.get("pos_x", data.get("posX", 0.0)),
            pos_y=data.get("pos_y", data.get("posY", 0.0)),
            width=data.get("width"),
            left=data.get("left", 0.0),
            top=data.get("top", 0.0),
            right=data.get("right", 0.0),
            bottom=data.get("bottom", 0.0),
        )
