"""
Module: layout

Purpose:
    Page geometry for one rendering pass: float exclusion bands, margin
    registers, nested margin scopes and the page lifecycle.

Key Classes:
    - Pager: Page lifecycle manager and geometry facade
    - FloatMarginMap: Quantized vertical key -> horizontal bounds
    - MarginRegisters: Default / background / active margins
    - MarginStateStack: Push/pop of margins plus float bands
    - PagerConfig: Configuration for the pager

Dependencies:
    - pager_toolkit.core.models: value types
    - pager_toolkit.output.surface: DrawingSurface
    - pager_toolkit.units: UnitConverter

Used By:
    - Box layout / rendering layer
    - scripts/render_float_demo.py
"""

from .config import PagerConfig
from .float_margins import FloatMarginMap
from .margins import MarginRegisters
from .state_stack import MarginStateStack
from .pager import Pager

__all__ = [
    # Config
    "PagerConfig",
    # Geometry
    "FloatMarginMap",
    "MarginRegisters",
    "MarginStateStack",
    # Lifecycle
    "Pager",
]
