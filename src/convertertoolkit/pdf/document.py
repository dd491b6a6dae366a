"""In-memory PDF document built on matplotlib's PDF backend."""

from __future__ import annotations

import io
import logging

from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.figure import Figure

from convertertoolkit.graphics.context import VectorGraphics
from convertertoolkit.graphics.hints import TextRenderingMode, rc_overrides, text_rc_params
from convertertoolkit.graphics.paper import POINTS_PER_INCH
from convertertoolkit.graphics.transform import PageOrigin

log = logging.getLogger(__name__)

__all__ = ["PdfDocument", "PdfPage"]


class PdfPage:
    """A single page; ``bounds`` is ``(x, y, width, height)`` in points."""

    def __init__(self, bounds: tuple[float, float, float, float]) -> None:
        _, _, width, height = bounds
        self._bounds = bounds
        self._figure = Figure(
            figsize=(width / POINTS_PER_INCH, height / POINTS_PER_INCH),
            dpi=POINTS_PER_INCH,
        )
        self._figure.patch.set_visible(False)
        self._graphics = VectorGraphics(self._figure, page_origin=PageOrigin.BOTTOM_LEFT)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return self._bounds

    @property
    def figure(self) -> Figure:
        return self._figure

    def get_graphics2d(self) -> VectorGraphics:
        return self._graphics


class PdfDocument:
    """Pages plus document information, serialised in one go."""

    def __init__(self) -> None:
        self._pages: list[PdfPage] = []
        self._title: str | None = None
        self._author: str | None = None

    @property
    def title(self) -> str | None:
        return self._title

    def set_title(self, title: str | None) -> None:
        self._title = title

    @property
    def author(self) -> str | None:
        return self._author

    def set_author(self, author: str | None) -> None:
        self._author = author

    @property
    def pages(self) -> list[PdfPage]:
        return list(self._pages)

    def create_page(self, bounds: tuple[float, float, float, float]) -> PdfPage:
        page = PdfPage(bounds)
        self._pages.append(page)
        return page

    def get_pdf_bytes(self) -> bytes:
        """Serialise every page; Title/Author entries are omitted when ``None``."""
        info = {"Title": self._title, "Author": self._author}
        metadata = {key: value for key, value in info.items() if value is not None}

        # Font embedding is decided when the file is closed, so one text mode
        # applies to the whole document.
        native = any(
            page.get_graphics2d().text_rendering_mode is TextRenderingMode.TEXT
            for page in self._pages
        )
        mode = TextRenderingMode.TEXT if native else TextRenderingMode.VECTOR

        buffer = io.BytesIO()
        with rc_overrides(text_rc_params("pdf", mode)):
            with PdfPages(buffer, metadata=metadata) as pdf:
                for page in self._pages:
                    pdf.savefig(page.figure)
        data = buffer.getvalue()
        log.debug("PDF document is %d bytes over %d page(s)", len(data), len(self._pages))
        return data
