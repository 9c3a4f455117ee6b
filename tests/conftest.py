import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import pager_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from pager_toolkit.output.surface import DrawingSurface
from pager_toolkit.units import UnitConverter


class FakeSurface(DrawingSurface):
    """In-memory drawing surface recording every call in order."""

    def __init__(self, width=200.0, height=280.0, margin=10.0):
        self.width = width
        self.height = height
        self.left = margin
        self.top = margin
        self.right = margin
        self.cursor_y = 0.0
        self.auto_page_break = (True, 20.0)
        self.pages = []
        self.calls = []

    def set_margins(self, left, top, right):
        self.calls.append(("set_margins", left, top, right))
        self.left, self.top, self.right = left, top, right

    def set_auto_page_break(self, enabled, bottom_margin):
        self.calls.append(("set_auto_page_break", enabled, bottom_margin))
        self.auto_page_break = (enabled, bottom_margin)

    def get_left_margin(self):
        return self.left

    def get_top_margin(self):
        return self.top

    def get_right_margin(self):
        return self.right

    def get_page_width(self):
        return self.width

    def get_page_height(self):
        return self.height

    def set_cursor_y(self, y):
        self.calls.append(("set_cursor_y", y))
        self.cursor_y = y

    def set_fill_color(self, color):
        self.calls.append(("set_fill_color", color))

    def fill_rectangle(self, x, y, w, h):
        self.calls.append(("fill_rectangle", x, y, w, h))

    def place_image(self, path, x, y, width):
        self.calls.append(("place_image", path, x, y, width))

    def create_page(self, orientation, format):
        self.calls.append(("create_page", orientation, format))
        self.pages.append((orientation, format))

    def begin_page_number_group(self):
        self.calls.append(("begin_page_number_group",))

    def begin_secondary_page_number_group(self):
        self.calls.append(("begin_secondary_page_number_group",))

    def call_names(self):
        return [call[0] for call in self.calls]


# Common test fixtures
@pytest.fixture
def surface():
    """200x280mm fake surface with 10mm margins."""
    return FakeSurface()


@pytest.fixture
def converter():
    return UnitConverter()


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple 200x100 test image."""
    img = Image.new("RGB", (200, 100), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path
