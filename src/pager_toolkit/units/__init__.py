"""
Module: units

Purpose:
    Length expression conversion to the canonical unit (millimetres).

Key Classes:
    - UnitConverter: Parses "10mm", "1.5cm", "20px", "50%" ...
    - UnitConversionError: Raised for unparseable expressions
"""

from .converter import UnitConverter, UnitConversionError

__all__ = [
    "UnitConverter",
    "UnitConversionError",
]
