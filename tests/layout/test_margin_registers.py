"""
Unit tests for margin registers and pager configuration.

Verifies default/background/active margin derivation and config validation.
"""

import pytest

from pager_toolkit.core.models import MarginBox, PageBackground
from pager_toolkit.layout import MarginRegisters, PagerConfig
from pager_toolkit.units import UnitConversionError


@pytest.fixture
def registers(converter):
    r = MarginRegisters(converter)
    r.set_default_margins([10, 12, 14, 16])
    return r


class TestMarginRegisters:
    """Tests for MarginRegisters."""

    def test_compute_active_when_no_background_then_defaults(self, registers):
        assert registers.compute_active() == MarginBox(10, 12, 14, 16)

    def test_compute_active_when_background_then_insets_added(self, registers):
        # Arrange
        registers.set_background(PageBackground(left=1, top=2, right=3, bottom=4))

        # Act
        active = registers.compute_active()

        # Assert
        assert active == MarginBox(11, 14, 17, 20)
        assert registers.active == active
        assert registers.default_margins == MarginBox(10, 12, 14, 16)

    def test_set_background_when_mapping_then_coerced(self, registers):
        registers.set_background({"top": 5, "img": "page.png"})

        assert registers.background == PageBackground(image="page.png", top=5)

    def test_set_background_when_none_then_insets_removed(self, registers):
        registers.set_background(PageBackground(left=5))
        registers.set_background(None)

        assert registers.compute_active().left == 10

    def test_reset_active_when_computed_then_back_to_defaults(self, registers):
        registers.set_background(PageBackground(left=5))
        registers.compute_active()

        registers.reset_active()

        assert registers.active == registers.default_margins

    def test_set_paragraph_margins_when_one_value_missing_then_cleared(self, registers):
        registers.set_paragraph_margins(20, 30)
        assert registers.paragraph == (20, 30)

        registers.set_paragraph_margins(20)

        assert registers.paragraph is None

    def test_set_default_margins_when_single_value_list_then_top_copies_left(self, converter):
        r = MarginRegisters(converter)

        r.set_default_margins([12])

        assert r.default_margins == MarginBox(12, 12, 12, 8)

    def test_set_default_margins_when_scalar_then_bottom_keeps_fallback(self, converter):
        r = MarginRegisters(converter)

        r.set_default_margins(10)

        assert r.default_margins == MarginBox(10, 10, 10, 8)

    def test_set_default_margins_when_scalar_with_unit_then_three_sides_converted(self, converter):
        r = MarginRegisters(converter, fallback_bottom=5)

        r.set_default_margins("2cm")

        margins = r.default_margins
        assert (margins.left, margins.top, margins.right) == pytest.approx((20, 20, 20))
        assert margins.bottom == 5

    def test_set_default_margins_when_empty_then_raises(self, converter):
        with pytest.raises(ValueError, match="at least one value"):
            MarginRegisters(converter).set_default_margins([])

    def test_set_default_margins_when_bad_unit_then_raises(self, converter):
        with pytest.raises(UnitConversionError):
            MarginRegisters(converter).set_default_margins("10furlongs")

    def test_set_default_margins_when_negative_then_raises(self, converter):
        with pytest.raises(ValueError, match="left margin must be >= 0"):
            MarginRegisters(converter).set_default_margins([-1, 0])


class TestPagerConfig:
    """Tests for PagerConfig validation."""

    def test_init_when_defaults_then_valid(self):
        config = PagerConfig()

        assert config.orientation == "P"
        assert config.format == "A4"
        assert config.fallback_bottom_margin == 8
        assert config.key_resolution == 100

    def test_init_when_bad_orientation_then_raises(self):
        with pytest.raises(ValueError, match="orientation"):
            PagerConfig(orientation="X")

    def test_init_when_non_positive_resolution_then_raises(self):
        with pytest.raises(ValueError, match="key_resolution must be positive"):
            PagerConfig(key_resolution=0)

    def test_init_when_negative_fallback_then_raises(self):
        with pytest.raises(ValueError, match="fallback_bottom_margin"):
            PagerConfig(fallback_bottom_margin=-1)
