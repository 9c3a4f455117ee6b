"""
Render a sample PDF showing how floats carve the usable line width.

Each page paints the effective [left, right] span of every row as a thin
bar, with a left and a right float and a nested margin scope in between.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path so we can import pager_toolkit
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from pager_toolkit.layout import Pager
from pager_toolkit.output import ReportLabSurface
from pager_toolkit.units import UnitConverter

# Setup logging
logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger("float_demo")

ROW_STEP_MM = 2.0
BAR_HEIGHT_MM = 1.2


def paint_rows(pager: Pager, surface: ReportLabSurface, y_start: float, y_end: float) -> None:
    """Paint the effective span of each row between y_start and y_end."""
    y = y_start
    while y < y_end:
        left, right = pager.get_margins(y)
        surface.fill_rectangle(left, y, right - left, BAR_HEIGHT_MM)
        y += ROW_STEP_MM


def render_demo(output: Path, margin: str, pages: int) -> Path:
    surface = ReportLabSurface(output)
    pager = Pager(UnitConverter(), surface)
    pager.set_default_margins(margin)
    pager.set_background({"color": [250, 250, 245]})

    for page in range(pages):
        pager.add_new_page(reset_page_number=(page == 0))
        top = pager.margin_top
        bottom = surface.get_page_height() - pager.margin_bottom
        width = surface.get_page_width()

        # Floats: one image-sized box on each side
        pager.add_box_margins("left", pager.margin_left, top + 20, pager.margin_left + 60, top + 80)
        pager.add_box_margins("right", width - pager.margin_right - 45, top + 50, width - pager.margin_right, top + 120)

        surface.set_fill_color((255, 220, 200))
        surface.fill_rectangle(pager.margin_left, top + 20, 60, 60)
        surface.fill_rectangle(width - pager.margin_right - 45, top + 50, 45, 70)

        surface.set_fill_color((60, 90, 160))
        paint_rows(pager, surface, top, top + 140)

        # Nested scope with its own margins, e.g. an indented block
        pager.add_state(pager.margin_left + 30, top + 140, pager.margin_right + 30)
        surface.set_fill_color((60, 160, 90))
        paint_rows(pager, surface, top + 140, top + 180)
        pager.restore_state()

        surface.set_fill_color((60, 90, 160))
        paint_rows(pager, surface, top + 180, bottom)

    return surface.save()


def main() -> int:
    parser = argparse.ArgumentParser(description="Render the float-margin demo PDF")
    parser.add_argument("--output", type=Path, default=Path("float_demo.pdf"), help="Output PDF path")
    parser.add_argument("--margin", type=str, default="15mm", help="Default page margin")
    parser.add_argument("--pages", type=int, default=1, help="Number of pages")
    args = parser.parse_args()

    path = render_demo(args.output, args.margin, args.pages)
    logger.info(f"Demo written to {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
