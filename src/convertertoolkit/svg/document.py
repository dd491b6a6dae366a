"""In-memory SVG document built on matplotlib's SVG backend."""

from __future__ import annotations

import io
import logging
from xml.sax.saxutils import escape

from matplotlib.figure import Figure

from convertertoolkit.graphics.context import VectorGraphics
from convertertoolkit.graphics.hints import KEY_ELEMENT_TITLE, rc_overrides, text_rc_params
from convertertoolkit.graphics.paper import POINTS_PER_INCH
from convertertoolkit.graphics.transform import PageOrigin

log = logging.getLogger(__name__)

__all__ = ["SvgDocument"]


class SvgDocument:
    """An integer-sized SVG canvas with a top-left page origin.

    The document title is taken from the ``KEY_ELEMENT_TITLE`` rendering hint
    on the canvas' drawing context.
    """

    def __init__(self, width: int, height: int) -> None:
        self._width = int(width)
        self._height = int(height)
        self._figure = Figure(
            figsize=(self._width / POINTS_PER_INCH, self._height / POINTS_PER_INCH),
            dpi=POINTS_PER_INCH,
        )
        self._figure.patch.set_visible(False)
        self._graphics = VectorGraphics(
            self._figure,
            page_origin=PageOrigin.TOP_LEFT,
            canvas_height=float(self._height),
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def get_graphics2d(self) -> VectorGraphics:
        return self._graphics

    def get_svg_document(self) -> str:
        """Serialise the canvas to a complete SVG document string."""
        title = self._graphics.get_rendering_hint(KEY_ELEMENT_TITLE)
        metadata = {"Title": title} if title else {}

        buffer = io.BytesIO()
        with rc_overrides(text_rc_params("svg", self._graphics.text_rendering_mode)):
            self._figure.savefig(buffer, format="svg", metadata=metadata)
        content = buffer.getvalue().decode("utf-8")

        if title:
            content = _insert_title_element(content, title)
        log.debug("SVG document is %d characters for %dx%d", len(content), self._width, self._height)
        return content


def _insert_title_element(content: str, title: str) -> str:
    start = content.find("<svg")
    if start < 0:
        raise ValueError("matplotlib output has no <svg> root element")
    end = content.find(">", start) + 1
    return f"{content[:end]}\n <title>{escape(title)}</title>{content[end:]}"
