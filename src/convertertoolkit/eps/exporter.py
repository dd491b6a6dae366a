"""Export a :class:`~convertertoolkit.component.VectorSource` to EPS.

EPS is written as UTF-8 so locale sensitive characters in the title survive.
"""

from __future__ import annotations

import logging

from convertertoolkit.component import VectorSource
from convertertoolkit.eps.document import EpsDocument
from convertertoolkit.export.base import (
    Sink,
    assembling,
    guarded_export,
    report_render,
    write_text,
)
from convertertoolkit.graphics.color import ColorMode
from convertertoolkit.graphics.hints import KEY_TEXT_RENDERING_MODE, text_mode_for
from convertertoolkit.graphics.paper import NA_LETTER_HEIGHT_POINTS, NA_LETTER_WIDTH_POINTS

log = logging.getLogger(__name__)

__all__ = ["create_document", "write_document"]

FORMAT = "eps"


def write_document(
    sink: Sink,
    component: VectorSource,
    title: str | None,
    creator: str | None = None,
    page_width: float = NA_LETTER_WIDTH_POINTS,
    page_height: float = NA_LETTER_HEIGHT_POINTS,
    color_mode: ColorMode = ColorMode.RGB,
    use_vectorized_text: bool = True,
) -> bool:
    """Render ``component`` to EPS and write it to ``sink``.

    Returns the component's render status; raises
    :class:`~convertertoolkit.core.errors.ExportError` subclasses on failure.
    """
    with assembling(FORMAT):
        bounds = component.vector_source_bounds()

        document = EpsDocument()
        graphics = document.get_graphics2d()
        graphics.set_color_mode(color_mode)
        graphics.set_rendering_hint(KEY_TEXT_RENDERING_MODE, text_mode_for(use_vectorized_text))

        rendered = component.vectorize(graphics)
        content = document.get_eps_document(
            title,
            creator,
            page_width,
            page_height,
            bounds.min_x,
            bounds.min_y,
            bounds.max_x,
            bounds.max_y,
        )

    write_text(sink, content, FORMAT)
    report_render(FORMAT, rendered, sink)
    return rendered


def create_document(
    sink: Sink,
    component: VectorSource,
    title: str | None,
    creator: str | None = None,
    page_width: float = NA_LETTER_WIDTH_POINTS,
    page_height: float = NA_LETTER_HEIGHT_POINTS,
    color_mode: ColorMode = ColorMode.RGB,
    use_vectorized_text: bool = True,
) -> bool:
    """Like :func:`write_document`, but failures are logged and reported as ``False``.

    The defaults give North American Letter, RGB output and outlined text, so
    rotated text stays rotated in the EPS.
    """
    return guarded_export(
        FORMAT,
        write_document,
        sink,
        component,
        title,
        creator,
        page_width,
        page_height,
        color_mode,
        use_vectorized_text,
    )
