"""
Module: units.converter

Purpose:
    Normalize heterogeneous length expressions to millimetres, the single
    linear unit used by the layout core and the drawing surface.

Key Classes:
    - UnitConverter: Expression -> millimetres
    - UnitConversionError: Invalid expression

Dependencies:
    - reportlab.lib.units: point factors for mm / cm / inch / pica

Used By:
    - layout.margins.MarginRegisters: default margins
"""

from __future__ import annotations

import logging
import re
from typing import Union

from reportlab.lib.units import cm, inch, mm, pica

logger = logging.getLogger(__name__)

# CSS reference pixel
DEFAULT_PX_PER_INCH = 96.0

_LENGTH_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))\s*([a-z%]*)\s*$", re.IGNORECASE)

Length = Union[int, float, str]


class UnitConversionError(ValueError):
    """Length expression cannot be converted."""
    pass


class UnitConverter:
    """
    Convert length expressions to millimetres.

    Numbers are taken as millimetres already. Strings carry their own unit:
    ``mm``, ``cm``, ``in``, ``pt``, ``pc``/``pica``, ``px`` and ``%``.
    A bare number string is millimetres too.

    Example:
        >>> converter = UnitConverter()
        >>> converter.to_mm("1cm")
        10.0
        >>> converter.to_mm("50%", reference=210)
        105.0
    """

    def __init__(self, *, px_per_inch: float = DEFAULT_PX_PER_INCH) -> None:
        if px_per_inch <= 0:
            raise ValueError(f"px_per_inch must be positive: {px_per_inch}")
        self.px_per_inch = px_per_inch
        # Points per unit; dividing by mm gives millimetres
        self._points = {
            "": mm,
            "mm": mm,
            "cm": cm,
            "in": inch,
            "pt": 1.0,
            "pc": pica,
            "pica": pica,
            "px": inch / px_per_inch,
        }

    def to_mm(self, expression: Length, reference: float = 0.0) -> float:
        """
        Convert a length expression to millimetres.

        Args:
            expression: Number (mm) or string like "12.5px"
            reference: Length in mm that a percentage is relative to

        Returns:
            Length in millimetres

        Raises:
            UnitConversionError: If the expression cannot be parsed
        """
        if isinstance(expression, bool):
            raise UnitConversionError(f"Not a length: {expression!r}")
        if isinstance(expression, (int, float)):
            return float(expression)

        match = _LENGTH_RE.match(str(expression))
        if not match:
            raise UnitConversionError(f"Cannot convert {expression!r} to mm")

        value = float(match.group(1))
        unit = match.group(2).lower()

        if unit == "%":
            return value * reference / 100.0

        factor = self._points.get(unit)
        if factor is None:
            raise UnitConversionError(f"Unknown unit {unit!r} in {expression!r}")

        result = value * factor / mm
        logger.debug(f"Converted {expression!r} to {result:.4f}mm")
        return result
