"""
Module: output.surface

Purpose:
    Abstract interface for the drawing surface the pager writes to.
    Keeps the layout core independent of the PDF back-end.

Key Classes:
    - DrawingSurface: Abstract base class for page/graphics primitives

Conventions:
    - All lengths are millimetres
    - Origin is the top-left corner of the page, y grows downward

Used By:
    - layout.float_margins: Fallback bounds from surface margins
    - layout.state_stack: Saving/applying surface margins
    - layout.pager: Page creation and background painting
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple, Union

from pager_toolkit.core.models.margins import ColorSpec

# Named format ("A4") or explicit (width_mm, height_mm)
PageFormat = Union[str, Tuple[float, float]]


class DrawingSurface(ABC):
    """
    Abstract drawing surface.

    Implementations own the physical page stack and the write cursor.
    The pager calls these synchronously and never shares the surface.
    """

    # ─────────────────────────────────────────────────────────────────────
    # Margins
    # ─────────────────────────────────────────────────────────────────────

    @abstractmethod
    def set_margins(self, left: float, top: float, right: float) -> None:
        """Set the left, top and right margins of the current page."""

    @abstractmethod
    def set_auto_page_break(self, enabled: bool, bottom_margin: float) -> None:
        """Enable or disable automatic page breaks at ``bottom_margin``."""

    @abstractmethod
    def get_left_margin(self) -> float:
        """Current left margin."""

    @abstractmethod
    def get_top_margin(self) -> float:
        """Current top margin."""

    @abstractmethod
    def get_right_margin(self) -> float:
        """Current right margin."""

    # ─────────────────────────────────────────────────────────────────────
    # Page geometry
    # ─────────────────────────────────────────────────────────────────────

    @abstractmethod
    def get_page_width(self) -> float:
        """Width of the current page."""

    @abstractmethod
    def get_page_height(self) -> float:
        """Height of the current page."""

    @abstractmethod
    def set_cursor_y(self, y: float) -> None:
        """Move the write cursor to ``y``."""

    # ─────────────────────────────────────────────────────────────────────
    # Painting
    # ─────────────────────────────────────────────────────────────────────

    @abstractmethod
    def set_fill_color(self, color: ColorSpec) -> None:
        """Set the fill colour for subsequent rectangles."""

    @abstractmethod
    def fill_rectangle(self, x: float, y: float, w: float, h: float) -> None:
        """Paint a filled rectangle with its top-left corner at (x, y)."""

    @abstractmethod
    def place_image(self, path: str, x: float, y: float, width: float | None) -> None:
        """
        Place an image with its top-left corner at (x, y).

        Args:
            path: Image file path
            x: Left edge
            y: Top edge
            width: Rendered width; the height keeps the aspect ratio.
                None renders at the image's natural size.
        """

    # ─────────────────────────────────────────────────────────────────────
    # Pages
    # ─────────────────────────────────────────────────────────────────────

    @abstractmethod
    def create_page(self, orientation: str, format: PageFormat) -> None:
        """Start a new physical page."""

    @abstractmethod
    def begin_page_number_group(self) -> None:
        """Start a new content-level page-numbering group at the next page."""

    @abstractmethod
    def begin_secondary_page_number_group(self) -> None:
        """Start a new display-level page-numbering group at the current page."""
