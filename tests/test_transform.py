import numpy as np
import pytest
from matplotlib.figure import Figure
from matplotlib.transforms import Affine2D

from convertertoolkit.component import SourceBounds
from convertertoolkit.graphics.context import VectorGraphics
from convertertoolkit.graphics.transform import (
    PageOrigin,
    apply_source_to_destination_transform,
    page_to_figure_transform,
    source_to_destination_transform,
)


def test_bottom_left_page_flips_y():
    transform = source_to_destination_transform(
        SourceBounds(0, 0, 100, 50), 200, 100, PageOrigin.BOTTOM_LEFT
    )

    assert transform.transform((0, 0)) == pytest.approx((0, 100))
    assert transform.transform((100, 50)) == pytest.approx((200, 0))
    assert transform.transform((50, 25)) == pytest.approx((100, 50))


def test_top_left_page_keeps_y_down():
    transform = source_to_destination_transform(
        SourceBounds(0, 0, 100, 50), 200, 100, PageOrigin.TOP_LEFT
    )

    assert transform.transform((0, 0)) == pytest.approx((0, 0))
    assert transform.transform((100, 50)) == pytest.approx((200, 100))


def test_source_origin_is_subtracted():
    transform = source_to_destination_transform(SourceBounds(10, 20, 110, 70), 200, 100)

    assert transform.transform((10, 20)) == pytest.approx((0, 100))
    assert transform.transform((110, 70)) == pytest.approx((200, 0))


def test_non_uniform_scale_fills_page():
    transform = source_to_destination_transform(
        SourceBounds(0, 0, 100, 100), 612, 792, PageOrigin.TOP_LEFT
    )

    assert transform.transform((100, 100)) == pytest.approx((612, 792))


@pytest.mark.parametrize("bounds", [SourceBounds(0, 0, 0, 50), SourceBounds(5, 5, 40, 5)])
def test_zero_extent_bounds_are_rejected(bounds):
    with pytest.raises(ValueError):
        source_to_destination_transform(bounds, 612, 792)


def test_page_to_figure_flips_top_left_pages_only():
    top_left = page_to_figure_transform(PageOrigin.TOP_LEFT, 100)
    bottom_left = page_to_figure_transform(PageOrigin.BOTTOM_LEFT, 100)

    assert top_left.transform((0, 0)) == pytest.approx((0, 100))
    assert top_left.transform((10, 100)) == pytest.approx((10, 0))
    assert bottom_left.transform((10, 20)) == pytest.approx((10, 20))


def test_apply_installs_transform_for_graphics_origin():
    figure = Figure(figsize=(2, 1), dpi=72)
    graphics = VectorGraphics(figure, page_origin=PageOrigin.TOP_LEFT, canvas_height=72)

    transform = apply_source_to_destination_transform(graphics, SourceBounds(0, 0, 10, 10), 144, 72)

    assert transform.transform((10, 10)) == pytest.approx((144, 72))
    assert np.allclose(graphics.get_page_transform().get_matrix(), transform.get_matrix())
    assert not np.allclose(graphics.get_page_transform().get_matrix(), Affine2D().get_matrix())
