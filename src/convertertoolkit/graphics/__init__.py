"""Drawing-context abstraction shared by the EPS, SVG and PDF exporters."""

from convertertoolkit.graphics.color import (
    BLACK,
    WHITE,
    ColorMode,
    apply_color_mode,
    foreground_from_background,
)
from convertertoolkit.graphics.context import VectorGraphics
from convertertoolkit.graphics.fonts import FontSpec
from convertertoolkit.graphics.hints import (
    KEY_ELEMENT_TITLE,
    KEY_TEXT_RENDERING_MODE,
    TextRenderingMode,
    text_mode_for,
)
from convertertoolkit.graphics.paper import (
    NA_LETTER_HEIGHT_POINTS,
    NA_LETTER_WIDTH_POINTS,
    PaperSize,
    paper_size,
)
from convertertoolkit.graphics.transform import (
    PageOrigin,
    apply_source_to_destination_transform,
    source_to_destination_transform,
)

__all__ = [
    "BLACK",
    "WHITE",
    "ColorMode",
    "FontSpec",
    "KEY_ELEMENT_TITLE",
    "KEY_TEXT_RENDERING_MODE",
    "NA_LETTER_HEIGHT_POINTS",
    "NA_LETTER_WIDTH_POINTS",
    "PageOrigin",
    "PaperSize",
    "TextRenderingMode",
    "VectorGraphics",
    "apply_color_mode",
    "apply_source_to_destination_transform",
    "foreground_from_background",
    "paper_size",
    "source_to_destination_transform",
    "text_mode_for",
]
