"""Page compositing of multi-region panels."""

from convertertoolkit.layout.compositor import (
    ROW_GAP,
    TITLE_PADDING_BOTTOM,
    CompositeHost,
    CompositeOffsets,
    Region,
    composite_row,
    composite_stacked_layout,
    stacked_layout_extent,
)

__all__ = [
    "ROW_GAP",
    "TITLE_PADDING_BOTTOM",
    "CompositeHost",
    "CompositeOffsets",
    "Region",
    "composite_row",
    "composite_stacked_layout",
    "stacked_layout_extent",
]
