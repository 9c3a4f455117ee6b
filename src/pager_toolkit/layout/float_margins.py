"""
Module: layout.float_margins

Purpose:
    Sparse ordered map from quantized vertical position to the usable
    horizontal span. Floated boxes carve exclusion bands into it; every
    other block asks it for the effective left/right bounds of its row.

Key Classes:
    - FloatMarginMap: seed / query / carve / snapshot / restore

Algorithm:
    Keys are floor(y * resolution). A query returns the bounds stored at the
    greatest key <= key(y), so each entry holds "from this row downward until
    the next entry". A carve:
    1. Reads the effective bounds at the band's top and bottom rows
    2. Tightens the top bounds on the float's side
    3. Drops every entry inside the band that is wider on that side
    4. Writes the tightened top row and the untouched bottom row back

Dependencies:
    - bisect (std): sorted key lookup
    - core.models.bounds: HorizontalBounds, FloatSide
    - output.surface: DrawingSurface (fallback bounds)

Used By:
    - layout.state_stack.MarginStateStack
    - layout.pager.Pager
"""

from __future__ import annotations

import logging
import math
from bisect import bisect_left, bisect_right, insort
from dataclasses import replace
from typing import Dict, List, Union

from pager_toolkit.core.models.bounds import FloatSide, HorizontalBounds
from pager_toolkit.core.models.state import BandSnapshot
from pager_toolkit.output.surface import DrawingSurface

from .config import KEY_RESOLUTION

logger = logging.getLogger(__name__)


class FloatMarginMap:
    """
    Float-margin bands of the current layout scope.

    The map never raises for geometry: an empty map answers with the full
    drawable width of the surface, and an inverted band (y_top > y_bottom)
    leaves it sorted and queryable.

    Example:
        >>> bands = FloatMarginMap(surface)
        >>> bands.seed(10, 10, 190)
        >>> bands.carve("left", 50, 10, 80, 30)
        >>> bands.query(15).left
        80
    """

    def __init__(self, surface: DrawingSurface, *, key_resolution: int = KEY_RESOLUTION) -> None:
        self._surface = surface
        self._resolution = key_resolution
        self._keys: List[int] = []
        self._bands: Dict[int, HorizontalBounds] = {}

    # ─────────────────────────────────────────────────────────────────────
    # Keys
    # ─────────────────────────────────────────────────────────────────────

    def key_for(self, y: float) -> int:
        """Quantize a vertical position to its map key."""
        return math.floor(y * self._resolution)

    def _put(self, key: int, bounds: HorizontalBounds) -> None:
        if key not in self._bands:
            insort(self._keys, key)
        self._bands[key] = bounds

    def _remove(self, key: int) -> None:
        del self._bands[key]
        self._keys.remove(key)

    # ─────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Remove every band."""
        self._keys.clear()
        self._bands.clear()

    def seed(self, y: float, left: float, right: float) -> None:
        """
        Set the bounds from row ``y`` downward, overwriting that row.

        Args:
            y: Vertical position of the row
            left: Left boundary
            right: Right boundary
        """
        self._put(self.key_for(y), HorizontalBounds(left, right))

    def carve(
        self,
        side: Union[FloatSide, str],
        x_left: float,
        y_top: float,
        x_right: float,
        y_bottom: float,
    ) -> None:
        """
        Register the exclusion band of a floated box.

        Args:
            side: FloatSide.LEFT / RIGHT (or "left" / "right")
            x_left: Left edge of the float
            y_top: Top edge of the float
            x_right: Right edge of the float
            y_bottom: Bottom edge of the float

        Raises:
            ValueError: If ``side`` is not left or right
        """
        side = FloatSide(side)
        if y_top > y_bottom:
            logger.warning(f"Inverted float band: y_top={y_top} > y_bottom={y_bottom}")

        # Bounds a plain line would get at the entry and exit rows
        old_top = self.query(y_top)
        old_bottom = self.query(y_bottom)

        if side is FloatSide.LEFT and old_top.is_narrower_left(x_right):
            old_top = replace(old_top, left=x_right)
        if side is FloatSide.RIGHT and old_top.is_narrower_right(x_left):
            old_top = replace(old_top, right=x_left)

        top_key = self.key_for(y_top)
        bottom_key = self.key_for(y_bottom)

        start = bisect_left(self._keys, top_key)
        stop = bisect_right(self._keys, bottom_key)
        for key in self._keys[start:stop]:
            bounds = self._bands[key]
            if side is FloatSide.LEFT and bounds.is_narrower_left(x_right):
                self._remove(key)
            elif side is FloatSide.RIGHT and bounds.is_narrower_right(x_left):
                self._remove(key)

        self._put(top_key, old_top)
        self._put(bottom_key, old_bottom)

        logger.debug(
            f"Carved {side.value} float [{x_left}, {x_right}] x [{y_top}, {y_bottom}], "
            f"{len(self._keys)} bands"
        )

    # ─────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────

    def default_bounds(self) -> HorizontalBounds:
        """Full drawable width from the surface's current margins."""
        return HorizontalBounds(
            self._surface.get_left_margin(),
            self._surface.get_page_width() - self._surface.get_right_margin(),
        )

    def query(self, y: float) -> HorizontalBounds:
        """
        Effective bounds at row ``y``.

        Args:
            y: Vertical position

        Returns:
            Bounds of the greatest key <= key(y), or the full drawable
            width when no band starts at or above ``y``
        """
        index = bisect_right(self._keys, self.key_for(y))
        if index == 0:
            return self.default_bounds()
        return self._bands[self._keys[index - 1]]

    def keys(self) -> List[int]:
        """Band keys in ascending order."""
        return list(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    # ─────────────────────────────────────────────────────────────────────
    # Snapshots
    # ─────────────────────────────────────────────────────────────────────

    def snapshot(self) -> BandSnapshot:
        """Immutable copy of the bands, ascending by key."""
        return tuple((key, self._bands[key]) for key in self._keys)

    def restore(self, bands: BandSnapshot) -> None:
        """Replace every band with the contents of a snapshot."""
        self._bands = dict(bands)
        self._keys = sorted(self._bands)
