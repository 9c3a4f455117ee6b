"""
Module: output.reportlab_surface

Purpose:
    DrawingSurface implementation on a ReportLab canvas. Coordinates come
    in as top-down millimetres and are converted to bottom-up PDF points.

Key Classes:
    - ReportLabSurface: Canvas-backed drawing surface
    - SurfaceError: Unknown page format or orientation

Dependencies:
    - reportlab: PDF generation, page sizes, colours
    - PIL: Image size for aspect-ratio preserving placement

Used By:
    - layout.pager.Pager (as its DrawingSurface)
    - scripts/render_float_demo.py
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image
from reportlab.lib import colors, pagesizes
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from pager_toolkit.core.models.margins import ColorSpec

from .surface import DrawingSurface, PageFormat

logger = logging.getLogger(__name__)

# FPDF-style default margin of 1cm (mm)
DEFAULT_MARGIN_MM = 10.0

_ORIENTATIONS = {
    "P": "P",
    "PORTRAIT": "P",
    "L": "L",
    "LANDSCAPE": "L",
}


class SurfaceError(ValueError):
    """Invalid page format or orientation."""
    pass


def resolve_page_size(orientation: str, format: PageFormat) -> Tuple[float, float]:
    """
    Resolve a page format and orientation to (width_mm, height_mm).

    Args:
        orientation: "P"/"L" or "portrait"/"landscape" (any case)
        format: Name from reportlab.lib.pagesizes ("A4", "letter", ...)
            or an explicit (width_mm, height_mm) pair

    Returns:
        Page size in millimetres, oriented

    Raises:
        SurfaceError: If the format or orientation is unknown
    """
    key = _ORIENTATIONS.get(str(orientation).upper())
    if key is None:
        raise SurfaceError(f"Unknown orientation: {orientation!r}")

    if isinstance(format, str):
        size_pt = getattr(pagesizes, format.upper(), None)
        if not isinstance(size_pt, tuple):
            raise SurfaceError(f"Unknown page format: {format!r}")
        size = (size_pt[0] / mm, size_pt[1] / mm)
    else:
        try:
            width, height = format
        except (TypeError, ValueError) as e:
            raise SurfaceError(f"Invalid page format: {format!r}") from e
        size = (float(width), float(height))

    if key == "L":
        return pagesizes.landscape(size)
    return pagesizes.portrait(size)


def _to_color(color: ColorSpec) -> colors.Color:
    if isinstance(color, str):
        return colors.toColor(color)
    r, g, b = color
    return colors.Color(r / 255.0, g / 255.0, b / 255.0)


class ReportLabSurface(DrawingSurface):
    """
    Drawing surface writing a PDF with ReportLab.

    Tracks two independent numbering groups: the content-level group
    opened before a page is created and the display-level group opened
    right after it.

    Example:
        >>> surface = ReportLabSurface(Path("out/document.pdf"))
        >>> surface.create_page("P", "A4")
        >>> surface.fill_rectangle(0, 0, 210, 20)
        >>> surface.save()
    """

    def __init__(
        self,
        output_path: Path,
        *,
        orientation: str = "P",
        format: PageFormat = "A4",
        margin: float = DEFAULT_MARGIN_MM,
    ) -> None:
        self.output_path = Path(output_path)
        self._page_width, self._page_height = resolve_page_size(orientation, format)
        self._canvas = canvas.Canvas(
            str(self.output_path),
            pagesize=(self._page_width * mm, self._page_height * mm),
        )

        self._left = margin
        self._top = margin
        self._right = margin
        self._auto_page_break = True
        self._break_margin = 2 * margin
        self._y = margin
        self._fill_color: Optional[colors.Color] = None

        self._page_count = 0
        self._open_page = False
        self._group_starts: List[int] = []
        self._display_group_starts: List[int] = []
        self._pending_group = False

    # ─────────────────────────────────────────────────────────────────────
    # Margins and cursor
    # ─────────────────────────────────────────────────────────────────────

    def set_margins(self, left: float, top: float, right: float) -> None:
        self._left = left
        self._top = top
        self._right = right

    def set_auto_page_break(self, enabled: bool, bottom_margin: float) -> None:
        self._auto_page_break = enabled
        self._break_margin = bottom_margin

    def get_left_margin(self) -> float:
        return self._left

    def get_top_margin(self) -> float:
        return self._top

    def get_right_margin(self) -> float:
        return self._right

    @property
    def auto_page_break(self) -> Tuple[bool, float]:
        """(enabled, bottom margin) of the automatic page break."""
        return (self._auto_page_break, self._break_margin)

    def get_page_width(self) -> float:
        return self._page_width

    def get_page_height(self) -> float:
        return self._page_height

    def set_cursor_y(self, y: float) -> None:
        self._y = y

    def get_cursor_y(self) -> float:
        return self._y

    # ─────────────────────────────────────────────────────────────────────
    # Painting
    # ─────────────────────────────────────────────────────────────────────

    def set_fill_color(self, color: ColorSpec) -> None:
        self._fill_color = _to_color(color)
        self._canvas.setFillColor(self._fill_color)

    def fill_rectangle(self, x: float, y: float, w: float, h: float) -> None:
        self._canvas.rect(
            x * mm,
            self._transform_y(y, h),
            w * mm,
            h * mm,
            stroke=0,
            fill=1,
        )

    def place_image(self, path: str, x: float, y: float, width: Optional[float]) -> None:
        """
        Place an image, keeping its aspect ratio.

        Raises:
            FileNotFoundError: If the image does not exist
        """
        with Image.open(path) as img:
            img_width, img_height = img.size
            dpi = img.info.get("dpi", (72, 72))[0] or 72
            reader = ImageReader(img.copy())

        if width is None:
            # Natural size at the image's own resolution
            width = img_width * 25.4 / dpi
        height = width * img_height / img_width

        self._canvas.drawImage(
            reader,
            x * mm,
            self._transform_y(y, height),
            width=width * mm,
            height=height * mm,
            mask="auto",
        )
        logger.debug(f"Placed image {path} at ({x}, {y}) width {width:.2f}mm")

    def _transform_y(self, y_top: float, height: float) -> float:
        """Top-down mm position of a box to its bottom-up PDF y in points."""
        return (self._page_height - y_top - height) * mm

    # ─────────────────────────────────────────────────────────────────────
    # Pages
    # ─────────────────────────────────────────────────────────────────────

    @property
    def page_count(self) -> int:
        return self._page_count

    def create_page(self, orientation: str, format: PageFormat) -> None:
        width, height = resolve_page_size(orientation, format)

        if self._open_page:
            self._canvas.showPage()

        self._page_width, self._page_height = width, height
        self._canvas.setPageSize((width * mm, height * mm))
        if self._fill_color is not None:
            # showPage() resets the graphics state
            self._canvas.setFillColor(self._fill_color)

        self._page_count += 1
        self._open_page = True
        if self._pending_group:
            self._group_starts.append(self._page_count)
            self._pending_group = False

        self._y = self._top
        logger.debug(f"Surface page {self._page_count}: {width:.1f}x{height:.1f}mm")

    def begin_page_number_group(self) -> None:
        self._pending_group = True

    def begin_secondary_page_number_group(self) -> None:
        self._display_group_starts.append(self._page_count)

    @staticmethod
    def _number_in_group(starts: List[int], page: int) -> int:
        first = 1
        for start in starts:
            if start <= page:
                first = start
        return page - first + 1

    def group_page_number(self, page: Optional[int] = None) -> int:
        """Page number within its content-level numbering group."""
        return self._number_in_group(self._group_starts, self._page_count if page is None else page)

    def display_page_number(self, page: Optional[int] = None) -> int:
        """Page number within its display-level numbering group."""
        return self._number_in_group(self._display_group_starts, self._page_count if page is None else page)

    def save(self) -> Path:
        """
        Write the PDF.

        Returns:
            Path of the written file
        """
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        if not self._open_page:
            logger.warning("No pages created, writing a blank page")
        self._canvas.showPage()
        self._canvas.save()
        logger.info(f"Rendered {max(self._page_count, 1)} pages to {self.output_path}")
        return self.output_path
