"""Compositing of several separately rendered regions onto one page.

Regions paint at their own origin, so the compositor moves the drawing
context's origin between renders: down past the title and the top region,
then across the bottom row. The offsets are plain configuration; nothing here
reads the on-screen layout.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from convertertoolkit.graphics.color import WHITE
from convertertoolkit.graphics.context import VectorGraphics

log = logging.getLogger(__name__)

__all__ = [
    "CompositeHost",
    "CompositeOffsets",
    "Region",
    "ROW_GAP",
    "TITLE_PADDING_BOTTOM",
    "composite_row",
    "composite_stacked_layout",
    "stacked_layout_extent",
]

TITLE_PADDING_BOTTOM = 12
ROW_GAP = 20


@dataclass(frozen=True)
class CompositeOffsets:
    title_padding_bottom: float = TITLE_PADDING_BOTTOM
    row_gap: float = ROW_GAP


class Region(Protocol):
    def width(self) -> int:
        ...

    def height(self) -> int:
        ...

    def vectorize(self, graphics: VectorGraphics) -> bool:
        ...


class CompositeHost(Protocol):
    """The titled container that owns the regions being composited."""

    def background_color(self) -> Any:
        ...

    def set_foreground_from_background(self, color: Any) -> None:
        ...

    def title_offset_y(self) -> float:
        ...

    def vectorize_title(self, graphics: VectorGraphics) -> bool:
        ...


def composite_row(graphics: VectorGraphics, regions: Sequence[Region]) -> bool:
    """Render ``regions`` left to right, leaving the origin where it started.

    A failed region stops the row; the horizontal shift is undone regardless.
    """
    shift = 0.0
    try:
        for index, region in enumerate(regions):
            if index:
                width = regions[index - 1].width()
                graphics.translate(width, 0)
                shift += width
            if not region.vectorize(graphics):
                log.debug("Row region %d of %d failed; skipping the rest", index + 1, len(regions))
                return False
        return True
    finally:
        if shift:
            graphics.translate(-shift, 0)


def composite_stacked_layout(
    graphics: VectorGraphics,
    host: CompositeHost,
    top: Region,
    bottom_left: Region,
    bottom_right: Region,
    offsets: CompositeOffsets = CompositeOffsets(),
) -> bool:
    """Render a title, a full-width top region and a two-region bottom row.

    The host is switched to a white background while rendering, so thin lines
    stay visible on paper, and is always switched back afterwards.
    """
    background = host.background_color()
    host.set_foreground_from_background(WHITE)
    try:
        host.vectorize_title(graphics)

        title_adjustment = host.title_offset_y() + offsets.title_padding_bottom
        graphics.translate(0, title_adjustment)
        exported = top.vectorize(graphics)
        graphics.translate(0, -title_adjustment)
        if not exported:
            log.debug("Top region failed; bottom row not rendered")
            return False

        row_offset = top.height() + title_adjustment + offsets.row_gap
        log.debug("Bottom row offset %.1f (title adjustment %.1f)", row_offset, title_adjustment)
        graphics.translate(0, row_offset)
        return composite_row(graphics, (bottom_left, bottom_right))
    finally:
        host.set_foreground_from_background(background)


def stacked_layout_extent(
    host: CompositeHost,
    top: Region,
    bottom_left: Region,
    bottom_right: Region,
    offsets: CompositeOffsets = CompositeOffsets(),
) -> tuple[float, float]:
    """Width and height covered by :func:`composite_stacked_layout`."""
    title_adjustment = host.title_offset_y() + offsets.title_padding_bottom
    row_width = bottom_left.width() + bottom_right.width()
    row_height = max(bottom_left.height(), bottom_right.height())
    width = max(top.width(), row_width)
    height = title_adjustment + top.height() + offsets.row_gap + row_height
    return width, height
