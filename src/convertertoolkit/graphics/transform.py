"""Source-to-page coordinate mapping shared by the page-based exporters."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from matplotlib.transforms import Affine2D

from convertertoolkit.component import SourceBounds

if TYPE_CHECKING:
    from convertertoolkit.graphics.context import VectorGraphics

log = logging.getLogger(__name__)

__all__ = [
    "PageOrigin",
    "apply_source_to_destination_transform",
    "page_to_figure_transform",
    "source_to_destination_transform",
]


class PageOrigin(Enum):
    """Where a document format puts (0, 0) on the page."""

    TOP_LEFT = "top-left"  # SVG, screen addressing
    BOTTOM_LEFT = "bottom-left"  # PDF, EPS, PostScript


def source_to_destination_transform(
    bounds: SourceBounds,
    page_width: float,
    page_height: float,
    origin: PageOrigin = PageOrigin.BOTTOM_LEFT,
) -> Affine2D:
    """Map ``bounds`` onto the full ``page_width`` x ``page_height`` page.

    Source coordinates are y-down. For bottom-left pages the Y axis is flipped
    so the top edge of the source lands on the top edge of the page.
    """
    source_width = bounds.max_x - bounds.min_x
    source_height = bounds.max_y - bounds.min_y
    if source_width == 0 or source_height == 0:
        raise ValueError(f"Cannot map empty source bounds {tuple(bounds)!r} onto a page")

    scale_x = page_width / source_width
    scale_y = page_height / source_height

    transform = Affine2D().translate(-bounds.min_x, -bounds.min_y)
    if origin is PageOrigin.BOTTOM_LEFT:
        transform.scale(scale_x, -scale_y).translate(0.0, page_height)
    else:
        transform.scale(scale_x, scale_y)
    return transform


def page_to_figure_transform(origin: PageOrigin, canvas_height: float) -> Affine2D:
    """Convert page points to matplotlib's bottom-left figure points."""
    if origin is PageOrigin.TOP_LEFT:
        return Affine2D().scale(1.0, -1.0).translate(0.0, canvas_height)
    return Affine2D()


def apply_source_to_destination_transform(
    graphics: "VectorGraphics",
    bounds: SourceBounds,
    page_width: float,
    page_height: float,
) -> Affine2D:
    """Install the source-to-page transform on ``graphics`` and return it."""
    transform = source_to_destination_transform(
        bounds, page_width, page_height, graphics.page_origin
    )
    log.debug(
        "Page transform for %s onto %.2fx%.2f pt (%s): %s",
        tuple(bounds),
        page_width,
        page_height,
        graphics.page_origin.value,
        transform.get_matrix().tolist(),
    )
    graphics.set_page_transform(transform)
    return transform
