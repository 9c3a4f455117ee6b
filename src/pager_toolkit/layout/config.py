"""
Module: layout.config

Purpose:
    Configuration for the pager.
    Defines the initial page format/orientation and geometry constants.

Key Classes:
    - PagerConfig: Immutable pager configuration

Dependencies:
    - dataclasses (std)

Used By:
    - layout.pager.Pager
    - layout.margins.MarginRegisters: fallback bottom margin
    - layout.float_margins.FloatMarginMap: key resolution
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ORIENTATION = "P"
DEFAULT_FORMAT = "A4"

# Bottom margin used when set_default_margins omits it (mm)
FALLBACK_BOTTOM_MARGIN_MM = 8.0

# Vertical keys are floor(y * KEY_RESOLUTION): hundredths of a millimetre
KEY_RESOLUTION = 100

VALID_ORIENTATIONS = ("P", "L")


@dataclass(frozen=True)
class PagerConfig:
    """
    Configuration for the pager (immutable).

    Attributes:
        orientation: Initial orientation, "P" (portrait) or "L" (landscape)
        format: Initial page format name, or (width_mm, height_mm)
        fallback_bottom_margin: Bottom margin when none is given (mm)
        key_resolution: Quantization factor for vertical keys

    Example:
        >>> config = PagerConfig(orientation="L")
        >>> config.key_resolution
        100
    """

    orientation: str = DEFAULT_ORIENTATION
    format: str | tuple[float, float] = DEFAULT_FORMAT
    fallback_bottom_margin: float = FALLBACK_BOTTOM_MARGIN_MM
    key_resolution: int = KEY_RESOLUTION

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.orientation not in VALID_ORIENTATIONS:
            raise ValueError(f"orientation must be one of {VALID_ORIENTATIONS}: {self.orientation!r}")
        if self.fallback_bottom_margin < 0:
            raise ValueError(f"fallback_bottom_margin must be non-negative: {self.fallback_bottom_margin}")
        if self.key_resolution <= 0:
            raise ValueError(f"key_resolution must be positive: {self.key_resolution}")
