"""
Module: layout.margins

Purpose:
    Margin registers of the current page: default margins, background
    insets, the active margins derived from both, and the optional
    paragraph-level left/right override.

Key Classes:
    - MarginRegisters: Default vs. active margin bookkeeping

Dependencies:
    - units.converter: UnitConverter (all margin inputs)
    - core.models.margins: MarginBox, PageBackground

Used By:
    - layout.pager.Pager
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from pager_toolkit.core.models.margins import MarginBox, PageBackground
from pager_toolkit.units.converter import Length, UnitConverter

from .config import FALLBACK_BOTTOM_MARGIN_MM

logger = logging.getLogger(__name__)

MarginSpec = Union[Length, Sequence[Length]]
BackgroundSpec = Union[PageBackground, Mapping[str, Any], None]


def coerce_background(background: BackgroundSpec) -> Optional[PageBackground]:
    """Accept a PageBackground, a legacy mapping or None."""
    if background is None or isinstance(background, PageBackground):
        return background
    return PageBackground.from_dict(background)


class MarginRegisters:
    """
    Default and active page margins.

    Active margins are always re-derived as default + background insets by
    :meth:`compute_active`; they are only set directly when a saved
    snapshot is restored or when they are reset to the defaults.

    Example:
        >>> registers = MarginRegisters(UnitConverter())
        >>> registers.set_default_margins(10)
        >>> registers.default_margins
        MarginBox(left=10.0, top=10.0, right=10.0, bottom=8.0)
    """

    def __init__(
        self,
        converter: UnitConverter,
        *,
        fallback_bottom: float = FALLBACK_BOTTOM_MARGIN_MM,
    ) -> None:
        self._converter = converter
        self._fallback_bottom = fallback_bottom
        self._default = MarginBox()
        self._active = MarginBox()
        self._background: Optional[PageBackground] = None
        self._paragraph: Optional[Tuple[float, float]] = None

    # ─────────────────────────────────────────────────────────────────────
    # Defaults
    # ─────────────────────────────────────────────────────────────────────

    def set_default_margins(self, margins: MarginSpec) -> None:
        """
        Set the default page margins.

        Args:
            margins: A single length for left, top and right, or up to
                four lengths in the order left, top, right, bottom. Right
                defaults to left, bottom to the fallback margin.
                Numbers are millimetres.
        """
        if isinstance(margins, (str, int, float)):
            values = [margins, margins, margins]
        else:
            values = list(margins)
            if not values:
                raise ValueError("margins must contain at least one value")

        # Top falls back to left when only one value came in a sequence
        if len(values) < 2:
            values.append(values[0])
        if len(values) < 3:
            values.append(values[0])
        if len(values) < 4:
            values.append(self._fallback_bottom)

        left, top, right, bottom = (self._converter.to_mm(v) for v in values[:4])
        self._default = MarginBox(left, top, right, bottom)
        logger.debug(f"Default margins set to {self._default}")

    @property
    def default_margins(self) -> MarginBox:
        return self._default

    # ─────────────────────────────────────────────────────────────────────
    # Background and paragraph override
    # ─────────────────────────────────────────────────────────────────────

    @property
    def background(self) -> Optional[PageBackground]:
        return self._background

    def set_background(self, background: BackgroundSpec) -> None:
        """Set (or clear with None) the page background descriptor."""
        self._background = coerce_background(background)

    @property
    def paragraph(self) -> Optional[Tuple[float, float]]:
        """Paragraph (left, right) margins, or None."""
        return self._paragraph

    def set_paragraph_margins(self, left: Optional[float] = None, right: Optional[float] = None) -> None:
        """Set the paragraph override; a missing value clears it."""
        if left is None or right is None:
            self._paragraph = None
        else:
            self._paragraph = (left, right)

    # ─────────────────────────────────────────────────────────────────────
    # Active margins
    # ─────────────────────────────────────────────────────────────────────

    @property
    def active(self) -> MarginBox:
        return self._active

    @active.setter
    def active(self, margins: MarginBox) -> None:
        self._active = margins

    def compute_active(self) -> MarginBox:
        """Derive and store active margins from defaults and background."""
        insets = self._background.insets if self._background is not None else MarginBox()
        self._active = self._default + insets
        return self._active

    def reset_active(self) -> None:
        """Set active margins back to the defaults."""
        self._active = self._default
