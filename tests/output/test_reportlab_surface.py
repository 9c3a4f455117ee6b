"""
Unit tests for the ReportLab drawing surface.

Canvas calls are verified with a patched reportlab Canvas; one test writes
a real PDF through the Pager to check the surface end to end.
"""

import pytest
from pathlib import Path
from unittest.mock import patch

from reportlab.lib.units import mm

from pager_toolkit.layout import Pager
from pager_toolkit.output import ReportLabSurface, SurfaceError, resolve_page_size


class TestResolvePageSize:
    """Tests for resolve_page_size()."""

    def test_resolve_when_a4_portrait_then_210_by_297(self):
        width, height = resolve_page_size("P", "A4")

        assert width == pytest.approx(210, abs=0.1)
        assert height == pytest.approx(297, abs=0.1)

    def test_resolve_when_landscape_then_swapped(self):
        width, height = resolve_page_size("landscape", "a4")

        assert width == pytest.approx(297, abs=0.1)
        assert height == pytest.approx(210, abs=0.1)

    def test_resolve_when_explicit_size_then_oriented(self):
        assert resolve_page_size("L", (100, 150)) == (150.0, 100.0)
        assert resolve_page_size("P", (150, 100)) == (100.0, 150.0)

    def test_resolve_when_unknown_format_then_raises(self):
        with pytest.raises(SurfaceError, match="Unknown page format"):
            resolve_page_size("P", "Z9")

    def test_resolve_when_unknown_orientation_then_raises(self):
        with pytest.raises(SurfaceError, match="Unknown orientation"):
            resolve_page_size("sideways", "A4")

    def test_resolve_when_malformed_size_then_raises(self):
        with pytest.raises(SurfaceError, match="Invalid page format"):
            resolve_page_size("P", (1, 2, 3))


@pytest.fixture
def mock_canvas():
    with patch("reportlab.pdfgen.canvas.Canvas") as canvas_cls:
        yield canvas_cls.return_value


@pytest.fixture
def rl_surface(mock_canvas, tmp_path):
    return ReportLabSurface(tmp_path / "out.pdf")


class TestReportLabSurface:
    """Tests for ReportLabSurface with a mocked canvas."""

    def test_margins_when_set_then_returned(self, rl_surface):
        rl_surface.set_margins(12, 14, 16)

        assert rl_surface.get_left_margin() == 12
        assert rl_surface.get_top_margin() == 14
        assert rl_surface.get_right_margin() == 16

    def test_auto_page_break_when_set_then_stored(self, rl_surface):
        rl_surface.set_auto_page_break(False, 8)

        assert rl_surface.auto_page_break == (False, 8)

    def test_fill_rectangle_when_top_down_then_flipped_to_pdf_space(self, rl_surface, mock_canvas):
        """A 10mm band at the top of the page sits at height - 10mm in PDF space."""
        # Arrange
        rl_surface.create_page("P", (200, 300))

        # Act
        rl_surface.fill_rectangle(0, 0, 200, 10)

        # Assert
        mock_canvas.rect.assert_called_once()
        args, kwargs = mock_canvas.rect.call_args
        assert args[0] == 0
        assert args[1] == pytest.approx(290 * mm)
        assert args[2] == pytest.approx(200 * mm)
        assert args[3] == pytest.approx(10 * mm)
        assert kwargs == {"stroke": 0, "fill": 1}

    def test_set_fill_color_when_rgb_triple_then_scaled(self, rl_surface, mock_canvas):
        rl_surface.set_fill_color((255, 0, 51))

        color = mock_canvas.setFillColor.call_args[0][0]
        assert (color.red, color.green, color.blue) == pytest.approx((1.0, 0.0, 0.2))

    def test_create_page_when_second_page_then_previous_shown(self, rl_surface, mock_canvas):
        # Act
        rl_surface.create_page("P", "A4")
        rl_surface.create_page("L", "A4")

        # Assert
        assert mock_canvas.showPage.call_count == 1
        assert rl_surface.page_count == 2
        assert rl_surface.get_page_width() == pytest.approx(297, abs=0.1)

    def test_create_page_when_fill_color_set_then_reapplied(self, rl_surface, mock_canvas):
        rl_surface.set_fill_color("red")
        rl_surface.create_page("P", "A4")

        assert mock_canvas.setFillColor.call_count == 2

    def test_page_numbers_when_groups_started_then_counted_per_group(self, rl_surface):
        # Arrange: pages 1-2, then new groups at page 3
        rl_surface.create_page("P", "A4")
        rl_surface.create_page("P", "A4")
        rl_surface.begin_page_number_group()
        rl_surface.create_page("P", "A4")
        rl_surface.begin_secondary_page_number_group()
        rl_surface.create_page("P", "A4")

        # Act & Assert
        assert rl_surface.group_page_number(2) == 2
        assert rl_surface.group_page_number() == 2
        assert rl_surface.display_page_number() == 2
        assert rl_surface.display_page_number(1) == 1

    def test_place_image_when_width_given_then_height_keeps_ratio(self, rl_surface, mock_canvas, sample_image):
        """A 200x100 image placed 50mm wide is 25mm high."""
        rl_surface.create_page("P", (200, 300))

        rl_surface.place_image(str(sample_image), 10, 20, 50)

        args, kwargs = mock_canvas.drawImage.call_args
        assert args[1] == pytest.approx(10 * mm)
        assert args[2] == pytest.approx((300 - 20 - 25) * mm)
        assert kwargs["width"] == pytest.approx(50 * mm)
        assert kwargs["height"] == pytest.approx(25 * mm)

    def test_place_image_when_missing_file_then_raises(self, rl_surface, tmp_path):
        with pytest.raises(FileNotFoundError):
            rl_surface.place_image(str(tmp_path / "missing.png"), 0, 0, 10)

    def test_save_when_no_pages_then_blank_page_written(self, rl_surface, mock_canvas):
        path = rl_surface.save()

        mock_canvas.showPage.assert_called_once()
        mock_canvas.save.assert_called_once()
        assert path.name == "out.pdf"


class TestReportLabSurfaceWithPager:
    """End-to-end: Pager driving a real ReportLab canvas."""

    def test_save_when_pages_with_background_then_pdf_written(self, converter, tmp_path, sample_image):
        # Arrange
        output = tmp_path / "nested" / "document.pdf"
        surface = ReportLabSurface(output)
        pager = Pager(converter, surface)
        pager.set_default_margins(15)
        pager.set_background({
            "color": [240, 240, 255],
            "img": str(sample_image),
            "posX": 10,
            "posY": 10,
            "width": 40,
        })

        # Act
        pager.add_new_page()
        pager.add_box_margins("left", 15, 30, 60, 80)
        pager.add_new_page(orientation="L", reset_page_number=True)
        path = surface.save()

        # Assert
        assert path.exists()
        assert path.read_bytes().startswith(b"%PDF")
        assert surface.page_count == 2
        assert pager.get_margins(50).left == pytest.approx(15)
        assert surface.get_cursor_y() == pytest.approx(15)
