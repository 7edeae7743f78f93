import matplotlib

matplotlib.use("Agg")

import pytest

from planar_hitscan import AbstractEntity
from planar_hitscan.plotting import draw_bounding_box


class Box(AbstractEntity):
    """Axis-aligned rectangle anchored at its top-left corner."""

    def __init__(self, x, y, w, h):
        super().__init__(x, y)
        self._w = w
        self._h = h

    @property
    def width(self):
        return self._w

    @property
    def height(self):
        return self._h

    def _intersect(self, x1, y1, x2, y2):
        return self.bounding_box_hit(x1, y1, x2, y2)

    def draw(self, surface):
        draw_bounding_box(self, surface)


class CenteredBox(Box):
    """Same geometry, anchored at the centre."""

    def bounding_box(self):
        hw, hh = self._w / 2.0, self._h / 2.0
        return self.x - hw, self.y - hh, self.x + hw, self.y + hh


@pytest.fixture
def unit_square():
    return Box(0.0, 0.0, 1.0, 1.0)


@pytest.fixture
def box_types():
    return Box, CenteredBox
