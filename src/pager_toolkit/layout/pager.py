"""
Module: layout.pager

Purpose:
    Page lifecycle and page geometry for one rendering pass.
    Owns page state and margin registers, delegates horizontal bounds to
    the float-margin map and scope snapshots to the margin state stack.

Key Classes:
    - Pager: Facade used by the box-layout layer

Lifecycle:
    NoPage (is_first_page, counter 0) --add_new_page()--> HasPages

    add_new_page():
    1. Leave the first-page state, apply format/orientation/background
    2. Reset surface margins to the defaults
    3. Open a numbering group (optional), create the page, open the
       display numbering group (optional)
    4. Count the page, paint background, header and footer (real pages)
    5. Recompute active margins and move the cursor to the top margin

Dependencies:
    - layout.float_margins: FloatMarginMap
    - layout.margins: MarginRegisters
    - layout.state_stack: MarginStateStack
    - output.surface: DrawingSurface
    - units.converter: UnitConverter

Used By:
    - Box layout / rendering layer (external)
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from pager_toolkit.core.models.bounds import FloatSide, HorizontalBounds
from pager_toolkit.core.models.margins import MarginBox, PageBackground
from pager_toolkit.core.models.state import MarginSnapshot, MarginState
from pager_toolkit.output.surface import DrawingSurface, PageFormat
from pager_toolkit.units.converter import UnitConverter

from .config import PagerConfig
from .float_margins import FloatMarginMap
from .margins import BackgroundSpec, MarginRegisters, MarginSpec
from .state_stack import MarginStateStack

logger = logging.getLogger(__name__)


class Pager:
    """
    Page lifecycle manager and page geometry facade.

    One instance per document pass; it must not be shared between
    concurrent renders.

    Args:
        converter: Unit converter for margin inputs
        surface: Drawing surface pages are created on
        config: Initial format/orientation and geometry constants

    Example:
        >>> pager = Pager(UnitConverter(), surface)
        >>> pager.set_default_margins(10)
        >>> pager.add_new_page()
        >>> pager.get_margins(50)
        HorizontalBounds(10, 200)
    """

    def __init__(
        self,
        converter: UnitConverter,
        surface: DrawingSurface,
        config: Optional[PagerConfig] = None,
    ) -> None:
        self.config = config or PagerConfig()
        self._surface = surface

        self._page = 0
        self._first_page = True
        self._orientation = self.config.orientation
        self._format: PageFormat = self.config.format

        self._registers = MarginRegisters(converter, fallback_bottom=self.config.fallback_bottom_margin)
        self._bands = FloatMarginMap(surface, key_resolution=self.config.key_resolution)
        self._states = MarginStateStack(surface, self._bands, lambda: self._registers.active)

    @property
    def surface(self) -> DrawingSurface:
        return self._surface

    @property
    def float_margins(self) -> FloatMarginMap:
        return self._bands

    @property
    def states(self) -> MarginStateStack:
        return self._states

    # ─────────────────────────────────────────────────────────────────────
    # Page state
    # ─────────────────────────────────────────────────────────────────────

    def init(self, orientation: str, format: PageFormat) -> None:
        """Start a new document: no pages, no saved states."""
        self._first_page = True
        self._page = 0
        self._orientation = orientation
        self._format = format
        self._states.clear()

    @property
    def orientation(self) -> str:
        return self._orientation

    @property
    def format(self) -> PageFormat:
        return self._format

    @property
    def is_first_page(self) -> bool:
        """True until the first page has been created."""
        return self._first_page

    @property
    def current_page(self) -> int:
        """Number of pages created so far (or as set by set_current_page)."""
        return self._page

    def set_current_page(self, page: int) -> None:
        self._page = page

    # ─────────────────────────────────────────────────────────────────────
    # Margin registers
    # ─────────────────────────────────────────────────────────────────────

    @property
    def margin_left(self) -> float:
        return self._registers.active.left

    @property
    def margin_top(self) -> float:
        return self._registers.active.top

    @property
    def margin_right(self) -> float:
        return self._registers.active.right

    @property
    def margin_bottom(self) -> float:
        return self._registers.active.bottom

    @property
    def default_margins(self) -> MarginBox:
        return self._registers.default_margins

    @property
    def background(self) -> Optional[PageBackground]:
        return self._registers.background

    def set_default_margins(self, margins: MarginSpec) -> None:
        """Set default margins: one length, or left, top[, right[, bottom]]."""
        self._registers.set_default_margins(margins)

    def set_background(self, background: BackgroundSpec) -> None:
        self._registers.set_background(background)

    def set_paragraph_margins(self, left: Optional[float] = None, right: Optional[float] = None) -> None:
        """Override the seed band's left/right margins; call with no values to clear."""
        self._registers.set_paragraph_margins(left, right)

    def set_margins(self) -> None:
        """
        Apply default + background margins to the surface and seed the
        float-margin map with one band at the top margin.
        """
        active = self._registers.compute_active()

        self._surface.set_margins(active.left, active.top, active.right)
        self._surface.set_auto_page_break(False, active.bottom)

        page_width = self._surface.get_page_width()
        paragraph = self._registers.paragraph

        self._bands.reset()
        if paragraph is not None:
            self._bands.seed(active.top, paragraph[0], page_width - paragraph[1])
        else:
            self._bands.seed(active.top, active.left, page_width - active.right)

    def current_marge(self) -> MarginSnapshot:
        """Snapshot of the active margins and float bands."""
        return MarginSnapshot(margins=self._registers.active, bands=self._bands.snapshot())

    def set_current_marge(self, snapshot: MarginSnapshot) -> None:
        """Restore a snapshot taken with current_marge()."""
        self._registers.active = snapshot.margins
        self._bands.restore(snapshot.bands)

    def reset_current_marge(self) -> None:
        """Active margins back to the defaults, float bands emptied."""
        self._registers.reset_active()
        self._bands.reset()

    # ─────────────────────────────────────────────────────────────────────
    # Float margins
    # ─────────────────────────────────────────────────────────────────────

    def add_margin(self, y: float, left: float, right: float) -> None:
        """Set the bounds from row ``y`` downward."""
        self._bands.seed(y, left, right)

    def add_box_margins(
        self,
        side: Union[FloatSide, str],
        x_left: float,
        y_top: float,
        x_right: float,
        y_bottom: float,
    ) -> None:
        """Carve the exclusion band of a floated box."""
        self._bands.carve(side, x_left, y_top, x_right, y_bottom)

    def get_margins(self, y: float) -> HorizontalBounds:
        """Effective (left, right) bounds at row ``y``."""
        return self._bands.query(y)

    # ─────────────────────────────────────────────────────────────────────
    # Margin state stack
    # ─────────────────────────────────────────────────────────────────────

    def add_state(self, left: float, top: float, right: float) -> None:
        """Save margins and float bands, then enter a scope with new margins."""
        self._states.push(left, top, right)

    def restore_state(self) -> MarginState:
        """Restore the latest saved margins and float bands."""
        return self._states.pop()

    # ─────────────────────────────────────────────────────────────────────
    # Pages
    # ─────────────────────────────────────────────────────────────────────

    def add_new_page(
        self,
        format: Optional[PageFormat] = None,
        orientation: Optional[str] = None,
        background: BackgroundSpec = None,
        reset_page_number: bool = False,
        real_page: bool = True,
    ) -> None:
        """
        Create a new page.

        Args:
            format: Page format for this and following pages
            orientation: "P" or "L" for this and following pages
            background: Background for this and following pages
            reset_page_number: Start new page-numbering groups
            real_page: Paint background, header and footer
        """
        self._first_page = False

        if format is not None:
            self._format = format

        if orientation is not None:
            self._orientation = orientation

        if background is not None:
            self._registers.set_background(background)

        default = self._registers.default_margins
        self._surface.set_margins(default.left, default.top, default.right)

        if reset_page_number:
            self._surface.begin_page_number_group()

        self._surface.create_page(self._orientation, self._format)

        if reset_page_number:
            self._surface.begin_secondary_page_number_group()

        self._page += 1
        logger.debug(f"Created page {self._page} ({self._orientation}, {self._format})")

        if real_page:
            self.draw_background()
            self.draw_page_header()
            self.draw_page_footer()

        self.set_margins()
        self._surface.set_cursor_y(self.margin_top)

    def draw_background(self) -> bool:
        """
        Paint the page background.

        Returns:
            False when no background is set, True otherwise
        """
        background = self._registers.background
        if background is None:
            return False

        if background.color:
            self._surface.set_fill_color(background.color)
            self._surface.fill_rectangle(
                0, 0, self._surface.get_page_width(), self._surface.get_page_height()
            )

        if background.image:
            self._surface.place_image(
                background.image,
                background.pos_x,
                background.pos_y,
                background.width,
            )

        return True

    def draw_page_header(self) -> bool:
        """Header hook; subclasses paint page headers here."""
        return True

    def draw_page_footer(self) -> bool:
        """Footer hook; subclasses paint page footers here."""
        return True
