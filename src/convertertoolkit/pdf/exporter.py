"""Export a :class:`~convertertoolkit.component.VectorSource` to PDF.

The PDF backend returns the whole file as bytes, so sinks must be binary.
"""

from __future__ import annotations

import logging

from convertertoolkit.component import VectorSource
from convertertoolkit.export.base import (
    Sink,
    assembling,
    guarded_export,
    report_render,
    write_bytes,
)
from convertertoolkit.graphics.color import ColorMode
from convertertoolkit.graphics.hints import KEY_TEXT_RENDERING_MODE, text_mode_for
from convertertoolkit.graphics.paper import NA_LETTER_HEIGHT_POINTS, NA_LETTER_WIDTH_POINTS
from convertertoolkit.graphics.transform import apply_source_to_destination_transform
from convertertoolkit.pdf.document import PdfDocument

log = logging.getLogger(__name__)

__all__ = ["create_document", "write_document"]

FORMAT = "pdf"


def write_document(
    sink: Sink,
    component: VectorSource,
    title: str | None,
    author: str | None = None,
    page_width: float = NA_LETTER_WIDTH_POINTS,
    page_height: float = NA_LETTER_HEIGHT_POINTS,
    color_mode: ColorMode = ColorMode.RGB,
    use_vectorized_text: bool = True,
) -> bool:
    """Render ``component`` to a one-page PDF and write it to ``sink``."""
    with assembling(FORMAT):
        bounds = component.vector_source_bounds()

        document = PdfDocument()
        document.set_title(title)
        document.set_author(author)
        page = document.create_page((0.0, 0.0, page_width, page_height))

        graphics = page.get_graphics2d()
        graphics.set_color_mode(color_mode)
        graphics.set_rendering_hint(KEY_TEXT_RENDERING_MODE, text_mode_for(use_vectorized_text))

        apply_source_to_destination_transform(graphics, bounds, page_width, page_height)

        rendered = component.vectorize(graphics)
        data = document.get_pdf_bytes()

    write_bytes(sink, data, FORMAT)
    report_render(FORMAT, rendered, sink)
    return rendered


def create_document(
    sink: Sink,
    component: VectorSource,
    title: str | None,
    author: str | None = None,
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
        author,
        page_width,
        page_height,
        color_mode,
        use_vectorized_text,
    )
