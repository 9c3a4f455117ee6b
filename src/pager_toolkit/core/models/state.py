"""
Module: state

Purpose:
    Immutable snapshots of page geometry: frames of the margin state stack
    and whole-page margin snapshots.

Key Classes:
    - StateOrigin: whether a frame was pushed or synthesized on empty pop
    - MarginState: one margin state stack frame
    - MarginSnapshot: registers plus float bands, for stash/restore

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - layout.state_stack.MarginStateStack
    - layout.pager.Pager
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

from .bounds import HorizontalBounds
from .margins import MarginBox

# Immutable copy of a float-margin map: ascending (key, bounds) pairs
BandSnapshot = Tuple[Tuple[int, HorizontalBounds], ...]


class StateOrigin(Enum):
    """
    Where a restored margin state came from.

    Attributes:
        PUSHED: Saved by an explicit push
        SYNTHESIZED: Built from the page margins because the stack was empty
    """

    PUSHED = auto()
    SYNTHESIZED = auto()


@dataclass(frozen=True)
class MarginState:
    """
    One frame of the margin state stack.

    Attributes:
        left: Surface left margin at push time
        top: Surface top margin at push time
        right: Surface right margin at push time
        bands: Float-margin map at push time
        origin: PUSHED or SYNTHESIZED
    """

    left: float
    top: float
    right: float
    bands: BandSnapshot
    origin: StateOrigin = StateOrigin.PUSHED

    @property
    def is_synthesized(self) -> bool:
        return self.origin is StateOrigin.SYNTHESIZED


@dataclass(frozen=True)
class MarginSnapshot:
    """
    Active margin registers plus the float bands of the current page.

    Attributes:
        margins: Active left/top/right/bottom margins
        bands: Float-margin map contents
    """

    margins: MarginBox
    bands: BandSnapshot
