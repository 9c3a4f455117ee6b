"""
Module: output

Purpose:
    Drawing surfaces the pager creates pages on and paints backgrounds to.

Key Classes:
    - DrawingSurface: Abstract surface interface
    - ReportLabSurface: PDF surface built on ReportLab
    - SurfaceError: Invalid page format or orientation
"""

from .surface import DrawingSurface
from .reportlab_surface import ReportLabSurface, SurfaceError, resolve_page_size

__all__ = [
    "DrawingSurface",
    "ReportLabSurface",
    "SurfaceError",
    "resolve_page_size",
]
