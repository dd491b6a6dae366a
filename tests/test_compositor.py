import pytest
from matplotlib.figure import Figure

from convertertoolkit.graphics.color import WHITE
from convertertoolkit.graphics.context import VectorGraphics
from convertertoolkit.layout.compositor import (
    CompositeOffsets,
    composite_row,
    composite_stacked_layout,
    stacked_layout_extent,
)


class _Host:
    def __init__(self, title_height=18, background="navy"):
        self.background = background
        self.title_height = title_height
        self.foreground_calls = []
        self.title_rendered = False

    def background_color(self):
        return self.background

    def set_foreground_from_background(self, color):
        self.foreground_calls.append(color)
        self.background = color

    def title_offset_y(self):
        return self.title_height

    def vectorize_title(self, graphics):
        self.title_rendered = True
        return True


class _Region:
    def __init__(self, width, height, result=True, error=None):
        self._width = width
        self._height = height
        self._result = result
        self._error = error
        self.origin = None

    def width(self):
        return self._width

    def height(self):
        return self._height

    def vectorize(self, graphics):
        self.origin = tuple(graphics.get_transform().transform((0, 0)))
        if self._error is not None:
            raise self._error
        return self._result


def _graphics():
    return VectorGraphics(Figure(figsize=(4, 4), dpi=72))


def test_regions_render_at_composited_offsets():
    g = _graphics()
    host = _Host(title_height=18)
    top, left, right = _Region(200, 100), _Region(80, 50), _Region(90, 60)

    assert composite_stacked_layout(g, host, top, left, right)

    # title 18 + padding 12
    assert top.origin == pytest.approx((0, 30))
    # 100 + 30 + row gap 20
    assert left.origin == pytest.approx((0, 150))
    assert right.origin == pytest.approx((80, 150))
    assert host.title_rendered


def test_custom_offsets_are_used():
    g = _graphics()
    top, left, right = _Region(100, 40), _Region(50, 20), _Region(50, 20)
    offsets = CompositeOffsets(title_padding_bottom=0, row_gap=5)

    composite_stacked_layout(g, _Host(title_height=10), top, left, right, offsets)

    assert top.origin == pytest.approx((0, 10))
    assert left.origin == pytest.approx((0, 55))


def test_row_leaves_no_horizontal_shift():
    g = _graphics()
    composite_stacked_layout(g, _Host(), _Region(10, 10), _Region(30, 10), _Region(40, 10))

    assert g.get_transform().transform((0, 0))[0] == pytest.approx(0)


def test_white_background_during_render_and_restored_after():
    host = _Host(background="navy")

    composite_stacked_layout(_graphics(), host, _Region(10, 10), _Region(10, 10), _Region(10, 10))

    assert host.foreground_calls == [WHITE, "navy"]
    assert host.background == "navy"


def test_failed_top_region_skips_bottom_row():
    host = _Host()
    left, right = _Region(10, 10), _Region(10, 10)

    result = composite_stacked_layout(_graphics(), host, _Region(10, 10, result=False), left, right)

    assert result is False
    assert left.origin is None and right.origin is None
    assert host.background == "navy"


def test_failed_left_region_skips_right_region():
    right = _Region(10, 10)

    result = composite_stacked_layout(
        _graphics(), _Host(), _Region(10, 10), _Region(10, 10, result=False), right
    )

    assert result is False
    assert right.origin is None


def test_background_restored_when_region_raises():
    host = _Host()

    with pytest.raises(RuntimeError):
        composite_stacked_layout(
            _graphics(), host, _Region(10, 10, error=RuntimeError("paint failed")), _Region(1, 1), _Region(1, 1)
        )

    assert host.background == "navy"


def test_composite_row_reverts_shift_after_failure():
    g = _graphics()
    regions = [_Region(25, 10), _Region(35, 10, result=False), _Region(45, 10)]

    assert composite_row(g, regions) is False
    assert regions[1].origin == pytest.approx((25, 0))
    assert regions[2].origin is None
    assert g.get_transform().transform((0, 0)) == pytest.approx((0, 0))


def test_stacked_layout_extent():
    width, height = stacked_layout_extent(_Host(title_height=18), _Region(200, 100), _Region(80, 50), _Region(90, 60))

    assert width == 200
    assert height == pytest.approx(30 + 100 + 20 + 60)
