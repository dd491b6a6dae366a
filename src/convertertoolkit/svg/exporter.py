"""Export a :class:`~convertertoolkit.component.VectorSource` to SVG.

SVG accepts UTF-8 and UTF-16; UTF-8 is used since it is byte-for-byte ASCII
for plain content.
"""

from __future__ import annotations

import logging
import math

from convertertoolkit.component import VectorSource
from convertertoolkit.export.base import (
    Sink,
    assembling,
    guarded_export,
    report_render,
    write_text,
)
from convertertoolkit.graphics.color import ColorMode
from convertertoolkit.graphics.hints import (
    KEY_ELEMENT_TITLE,
    KEY_TEXT_RENDERING_MODE,
    text_mode_for,
)
from convertertoolkit.graphics.paper import NA_LETTER_HEIGHT_POINTS, NA_LETTER_WIDTH_POINTS
from convertertoolkit.graphics.transform import apply_source_to_destination_transform
from convertertoolkit.svg.document import SvgDocument

log = logging.getLogger(__name__)

__all__ = ["DEFAULT_TITLE", "create_document", "document_title", "write_document"]

FORMAT = "svg"
DEFAULT_TITLE = "The SVG Document"


def document_title(title: str | None) -> str:
    """Return ``title``, or the placeholder title when it is empty."""
    return title if title else DEFAULT_TITLE


def write_document(
    sink: Sink,
    component: VectorSource,
    title: str | None,
    page_width: float = NA_LETTER_WIDTH_POINTS,
    page_height: float = NA_LETTER_HEIGHT_POINTS,
    color_mode: ColorMode = ColorMode.RGB,
    use_vectorized_text: bool = True,
) -> bool:
    """Render ``component`` to SVG and write it to ``sink``.

    The canvas is rounded up to whole points so floating-point transforms
    never clip the content; the page transform still uses the exact size.
    """
    with assembling(FORMAT):
        bounds = component.vector_source_bounds()

        document = SvgDocument(math.ceil(page_width), math.ceil(page_height))
        graphics = document.get_graphics2d()
        graphics.set_color_mode(color_mode)
        graphics.set_rendering_hint(KEY_TEXT_RENDERING_MODE, text_mode_for(use_vectorized_text))
        graphics.set_rendering_hint(KEY_ELEMENT_TITLE, document_title(title))

        apply_source_to_destination_transform(graphics, bounds, page_width, page_height)

        rendered = component.vectorize(graphics)
        content = document.get_svg_document()

    write_text(sink, content, FORMAT)
    report_render(FORMAT, rendered, sink)
    return rendered


def create_document(
    sink: Sink,
    component: VectorSource,
    title: str | None,
    page_width: float = NA_LETTER_WIDTH_POINTS,
    page_height: float = NA_LETTER_HEIGHT_POINTS,
    color_mode: ColorMode = ColorMode.RGB,
    use_vectorized_text: bool = True,
) -> bool:
    """Like :func:`write_document`, but failures are logged and reported as ``False``."""
    return guarded_export(
        FORMAT,
        write_document,
        sink,
        component,
        title,
        page_width,
        page_height,
        color_mode,
        use_vectorized_text,
    )
