"""
Module: layout.state_stack

Purpose:
    Save and restore the surface margins together with the float-margin
    map around nested layout scopes (a box with its own margins, a table
    cell, ...).

Key Classes:
    - MarginStateStack: push / pop of MarginState frames

Behavior:
    - push() saves the surface's left/top/right margins and the float bands,
      then starts a fresh scope with one band at the new margins
    - pop() restores the latest frame as a unit; on an empty stack it
      synthesizes a frame from the page's left/right margins with top = 0

Dependencies:
    - layout.float_margins: FloatMarginMap
    - core.models.state: MarginState, StateOrigin
    - output.surface: DrawingSurface

Used By:
    - layout.pager.Pager
"""

from __future__ import annotations

import logging
from typing import Callable, List

from pager_toolkit.core.models.bounds import HorizontalBounds
from pager_toolkit.core.models.margins import MarginBox
from pager_toolkit.core.models.state import MarginState, StateOrigin
from pager_toolkit.output.surface import DrawingSurface

from .float_margins import FloatMarginMap

logger = logging.getLogger(__name__)


class MarginStateStack:
    """
    Stack of saved margin states.

    Args:
        surface: Drawing surface whose margins are saved and applied
        bands: Float-margin map saved and restored with the margins
        page_margins: Callable returning the page's active margin
            registers, used to synthesize a frame on an unbalanced pop
    """

    def __init__(
        self,
        surface: DrawingSurface,
        bands: FloatMarginMap,
        page_margins: Callable[[], MarginBox],
    ) -> None:
        self._surface = surface
        self._bands = bands
        self._page_margins = page_margins
        self._frames: List[MarginState] = []

    @property
    def depth(self) -> int:
        """Number of saved frames."""
        return len(self._frames)

    def clear(self) -> None:
        self._frames.clear()

    def push(self, left: float, top: float, right: float) -> None:
        """
        Save the current state and enter a scope with new margins.

        Args:
            left: New left margin
            top: New top margin (row of the scope's first band)
            right: New right margin
        """
        self._frames.append(MarginState(
            left=self._surface.get_left_margin(),
            top=self._surface.get_top_margin(),
            right=self._surface.get_right_margin(),
            bands=self._bands.snapshot(),
        ))

        self._surface.set_margins(left, top, right)

        self._bands.reset()
        self._bands.seed(top, left, self._surface.get_page_width() - right)

        logger.debug(f"Pushed margin state ({left}, {top}, {right}), depth {self.depth}")

    def pop(self) -> MarginState:
        """
        Restore the latest saved state.

        Never raises: an empty stack yields a synthesized frame.

        Returns:
            The frame that was applied
        """
        if self._frames:
            frame = self._frames.pop()
        else:
            frame = self._synthesize()
            logger.debug("Margin state stack empty, restoring page margins")

        self._surface.set_margins(frame.left, frame.top, frame.right)
        self._bands.restore(frame.bands)

        logger.debug(f"Restored margin state ({frame.left}, {frame.top}, {frame.right}), depth {self.depth}")
        return frame

    def _synthesize(self) -> MarginState:
        margins = self._page_margins()
        top = 0.0
        right_edge = self._surface.get_page_width() - margins.right
        return MarginState(
            left=margins.left,
            top=top,
            right=margins.right,
            bands=((self._bands.key_for(top), HorizontalBounds(margins.left, right_edge)),),
            origin=StateOrigin.SYNTHESIZED,
        )
