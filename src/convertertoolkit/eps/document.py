"""In-memory EPS document built on matplotlib's PostScript backend.

Unlike the SVG and PDF documents, the page transform is not installed by the
caller: :meth:`EpsDocument.get_eps_document` receives the source bounds and
maps them onto the page itself, after painting has finished.
"""

from __future__ import annotations

import io
import logging

from matplotlib.figure import Figure

from convertertoolkit.component import SourceBounds
from convertertoolkit.graphics.context import VectorGraphics
from convertertoolkit.graphics.hints import rc_overrides, text_rc_params
from convertertoolkit.graphics.paper import (
    NA_LETTER_HEIGHT_POINTS,
    NA_LETTER_WIDTH_POINTS,
    POINTS_PER_INCH,
)
from convertertoolkit.graphics.transform import PageOrigin, source_to_destination_transform

log = logging.getLogger(__name__)

__all__ = ["EpsDocument"]

_TITLE_COMMENT = "%%Title:"
_CREATOR_COMMENT = "%%Creator:"


class EpsDocument:
    """One EPS page plus the drawing context that paints it."""

    def __init__(self) -> None:
        self._figure = Figure(
            figsize=(
                NA_LETTER_WIDTH_POINTS / POINTS_PER_INCH,
                NA_LETTER_HEIGHT_POINTS / POINTS_PER_INCH,
            ),
            dpi=POINTS_PER_INCH,
        )
        self._figure.patch.set_visible(False)
        self._graphics = VectorGraphics(self._figure, page_origin=PageOrigin.BOTTOM_LEFT)

    def get_graphics2d(self) -> VectorGraphics:
        return self._graphics

    def get_eps_document(
        self,
        title: str | None,
        creator: str | None,
        page_width: float,
        page_height: float,
        min_x: float,
        min_y: float,
        max_x: float,
        max_y: float,
    ) -> str:
        """Serialise the page, framed by a DSC header carrying title and creator."""
        self._figure.set_size_inches(page_width / POINTS_PER_INCH, page_height / POINTS_PER_INCH)
        self._graphics.set_page_transform(
            source_to_destination_transform(
                SourceBounds(min_x, min_y, max_x, max_y),
                page_width,
                page_height,
                PageOrigin.BOTTOM_LEFT,
            )
        )

        buffer = io.BytesIO()
        with rc_overrides(text_rc_params("eps", self._graphics.text_rendering_mode)):
            self._figure.savefig(buffer, format="eps")

        # The PostScript backend writes latin-1; the header comments are ours.
        body = buffer.getvalue().decode("latin-1")
        log.debug("EPS body is %d bytes for %.1fx%.1f pt", len(body), page_width, page_height)
        return _frame_header(body, title, creator)


def _comment_value(value: str) -> str:
    # DSC comments are single lines.
    return " ".join(value.splitlines())


def _frame_header(body: str, title: str | None, creator: str | None) -> str:
    """Put ``%%Title:`` and ``%%Creator:`` right after the version line.

    A ``None`` title means no title comment; a ``None`` creator keeps the
    backend's own creator comment.
    """
    replaced = [_TITLE_COMMENT]
    comments = []
    if title is not None:
        comments.append(f"{_TITLE_COMMENT} {_comment_value(title)}")
    if creator is not None:
        replaced.append(_CREATOR_COMMENT)
        comments.append(f"{_CREATOR_COMMENT} {_comment_value(creator)}")

    lines = [line for line in body.split("\n") if not line.startswith(tuple(replaced))]
    lines[1:1] = comments
    return "\n".join(lines)
