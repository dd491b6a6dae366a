"""Graphics2D-style drawing context that records into a matplotlib Figure.

Sources paint in their own y-down coordinates through ``translate``/``scale``
and the usual primitives. Each primitive becomes a matplotlib artist whose
transform chains, from innermost to outermost:

1. the user transform in effect when the primitive was drawn,
2. the page transform (source to page points, see
   :func:`convertertoolkit.graphics.transform.source_to_destination_transform`),
3. the device transform (page origin to matplotlib figure points).

The page transform is a live :class:`~matplotlib.transforms.Affine2D`, so a
document may install it after painting has finished; stroke widths and native
text sizes are recomputed when that happens.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Any

import numpy as np
from matplotlib.artist import Artist
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import Ellipse, PathPatch, Rectangle
from matplotlib.path import Path
from matplotlib.text import Text
from matplotlib.textpath import TextPath
from matplotlib.transforms import Affine2D, Transform

from convertertoolkit.graphics.color import BLACK, RGBA, WHITE, ColorMode, apply_color_mode
from convertertoolkit.graphics.fonts import FontSpec
from convertertoolkit.graphics.hints import KEY_TEXT_RENDERING_MODE, TextRenderingMode
from convertertoolkit.graphics.paper import POINTS_PER_INCH
from convertertoolkit.graphics.transform import PageOrigin, page_to_figure_transform

log = logging.getLogger(__name__)

__all__ = ["VectorGraphics"]

_Update = Callable[[np.ndarray], None]


@dataclass
class _GraphicsState:
    matrix: np.ndarray = field(default_factory=lambda: np.identity(3))
    color: Any = BLACK
    background: Any = WHITE
    font: FontSpec = field(default_factory=FontSpec)
    line_width: float = 1.0
    clip: tuple[np.ndarray, tuple[float, float, float, float]] | None = None

    def copy(self) -> "_GraphicsState":
        return replace(self, matrix=self.matrix.copy())


class VectorGraphics:
    """Drawing context for one page of a vector document."""

    def __init__(
        self,
        figure: Figure,
        *,
        page_origin: PageOrigin = PageOrigin.BOTTOM_LEFT,
        canvas_height: float | None = None,
        color_mode: ColorMode = ColorMode.RGB,
    ) -> None:
        if canvas_height is None:
            canvas_height = figure.get_figheight() * POINTS_PER_INCH
        self._figure = figure
        self._page_origin = page_origin
        self._color_mode = color_mode
        self._page_transform = Affine2D()
        origin_transform = page_to_figure_transform(page_origin, canvas_height)
        self._origin_linear = origin_transform.get_matrix()[:2, :2].copy()
        self._device_transform: Transform = (
            origin_transform
            + Affine2D().scale(1.0 / POINTS_PER_INCH)
            + figure.dpi_scale_trans
        )
        self._state = _GraphicsState()
        self._stack: list[_GraphicsState] = []
        self._hints: dict[str, Any] = {KEY_TEXT_RENDERING_MODE: TextRenderingMode.VECTOR}
        self._scaled: list[tuple[np.ndarray, _Update]] = []
        self._sequence = 0

    # ------------------------------------------------------------------
    @property
    def figure(self) -> Figure:
        return self._figure

    @property
    def page_origin(self) -> PageOrigin:
        return self._page_origin

    @property
    def color_mode(self) -> ColorMode:
        return self._color_mode

    def set_color_mode(self, mode: ColorMode) -> None:
        self._color_mode = mode

    @property
    def text_rendering_mode(self) -> TextRenderingMode:
        return TextRenderingMode(self._hints[KEY_TEXT_RENDERING_MODE])

    def set_rendering_hint(self, key: str, value: Any) -> None:
        self._hints[key] = value

    def get_rendering_hint(self, key: str, default: Any = None) -> Any:
        return self._hints.get(key, default)

    # ------------------------------------------------------------------
    # Page mapping
    def set_page_transform(self, transform: Affine2D) -> None:
        """Install the source-to-page transform, even after painting."""
        self._page_transform.set_matrix(transform.get_matrix().copy())
        for matrix, update in self._scaled:
            update(self._figure_linear(matrix))

    def get_page_transform(self) -> Affine2D:
        return Affine2D(self._page_transform.get_matrix().copy())

    # ------------------------------------------------------------------
    # User transform
    def translate(self, dx: float, dy: float) -> None:
        self.transform(Affine2D().translate(dx, dy))

    def scale(self, sx: float, sy: float | None = None) -> None:
        self.transform(Affine2D().scale(sx, sx if sy is None else sy))

    def rotate(self, theta: float, x: float = 0.0, y: float = 0.0) -> None:
        """Rotate by ``theta`` radians about ``(x, y)``."""
        self.transform(Affine2D().rotate_around(x, y, theta))

    def transform(self, affine: Affine2D) -> None:
        """Concatenate ``affine`` so it applies before the current transform."""
        self._state.matrix = self._state.matrix @ affine.get_matrix()

    def get_transform(self) -> Affine2D:
        return Affine2D(self._state.matrix.copy())

    def set_transform(self, affine: Affine2D) -> None:
        self._state.matrix = affine.get_matrix().copy()

    # ------------------------------------------------------------------
    # State stack
    def save(self) -> None:
        self._stack.append(self._state.copy())

    def restore(self) -> None:
        if not self._stack:
            raise RuntimeError("restore() called without a matching save()")
        self._state = self._stack.pop()

    @contextmanager
    def state(self) -> Iterator["VectorGraphics"]:
        self.save()
        try:
            yield self
        finally:
            self.restore()

    # ------------------------------------------------------------------
    # Paint attributes
    def set_color(self, color: Any) -> None:
        self._state.color = color

    def get_color(self) -> RGBA:
        return apply_color_mode(self._state.color, self._color_mode)

    def set_background(self, color: Any) -> None:
        self._state.background = color

    def get_background(self) -> RGBA:
        return apply_color_mode(self._state.background, self._color_mode)

    def set_font(self, font: FontSpec) -> None:
        self._state.font = font

    def get_font(self) -> FontSpec:
        return self._state.font

    def set_line_width(self, width: float) -> None:
        self._state.line_width = float(width)

    def get_line_width(self) -> float:
        return self._state.line_width

    def set_clip(self, x: float, y: float, width: float, height: float) -> None:
        self._state.clip = (self._state.matrix.copy(), (x, y, width, height))

    def clear_clip(self) -> None:
        self._state.clip = None

    # ------------------------------------------------------------------
    # Primitives
    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.draw_polyline((x1, x2), (y1, y2))

    def draw_polyline(self, xs: Sequence[float], ys: Sequence[float]) -> None:
        line = Line2D(
            list(xs),
            list(ys),
            color=self.get_color(),
            solid_capstyle="butt",
            solid_joinstyle="miter",
        )
        self._add_stroked(line)

    def draw_rect(self, x: float, y: float, width: float, height: float) -> None:
        rect = Rectangle((x, y), width, height, fill=False, edgecolor=self.get_color())
        self._add_stroked(rect)

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._add(self._filled(Rectangle((x, y), width, height), self.get_color()))

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Paint the rectangle with the current background colour."""
        self._add(self._filled(Rectangle((x, y), width, height), self.get_background()))

    def draw_oval(self, x: float, y: float, width: float, height: float) -> None:
        oval = Ellipse(
            (x + width / 2.0, y + height / 2.0),
            width,
            height,
            fill=False,
            edgecolor=self.get_color(),
        )
        self._add_stroked(oval)

    def fill_oval(self, x: float, y: float, width: float, height: float) -> None:
        oval = Ellipse((x + width / 2.0, y + height / 2.0), width, height)
        self._add(self._filled(oval, self.get_color()))

    def draw_string(self, text: str, x: float, y: float) -> None:
        """Draw ``text`` with its baseline starting at ``(x, y)``."""
        if not text:
            return
        if self.text_rendering_mode is TextRenderingMode.TEXT:
            self._draw_native_text(text, x, y)
        else:
            self._draw_outlined_text(text, x, y)

    # ------------------------------------------------------------------
    def _draw_outlined_text(self, text: str, x: float, y: float) -> None:
        outline = TextPath((0.0, 0.0), text, prop=self._state.font.to_font_properties())
        # TextPath is y-up; flip it into the source's y-down space.
        glyphs = Affine2D().scale(1.0, -1.0).translate(x, y).transform_path(outline)
        self._add(self._filled(PathPatch(glyphs), self.get_color()))

    def _draw_native_text(self, text: str, x: float, y: float) -> None:
        font = self._state.font
        artist = Text(
            x,
            y,
            text,
            color=self.get_color(),
            fontproperties=font.to_font_properties(),
            horizontalalignment="left",
            verticalalignment="baseline",
            rotation_mode="anchor",
        )
        matrix = self._add(artist)

        def update(linear: np.ndarray) -> None:
            artist.set_fontsize(font.size * _linear_scale(linear))
            artist.set_rotation(math.degrees(math.atan2(linear[1, 0], linear[0, 0])))

        self._track(matrix, update)

    @staticmethod
    def _filled(patch, color: RGBA):
        patch.set_facecolor(color)
        patch.set_edgecolor("none")
        patch.set_linewidth(0.0)
        return patch

    def _add_stroked(self, artist: Artist) -> None:
        matrix = self._add(artist)
        width = self._state.line_width
        self._track(matrix, lambda linear: artist.set_linewidth(width * _linear_scale(linear)))

    def _add(self, artist: Artist) -> np.ndarray:
        matrix = self._state.matrix.copy()
        artist.set_transform(self._chain(matrix))
        if self._state.clip is not None:
            clip_matrix, (cx, cy, cw, ch) = self._state.clip
            clip_box = Affine2D().scale(cw, ch).translate(cx, cy)
            artist.set_clip_path(Path.unit_rectangle(), clip_box + self._chain(clip_matrix))
        # Figures draw by z-order; a running counter keeps paint order.
        self._sequence += 1
        artist.set_zorder(self._sequence)
        self._figure.add_artist(artist)
        return matrix

    def _chain(self, matrix: np.ndarray) -> Transform:
        return Affine2D(matrix) + self._page_transform + self._device_transform

    def _track(self, matrix: np.ndarray, update: _Update) -> None:
        self._scaled.append((matrix, update))
        update(self._figure_linear(matrix))

    def _figure_linear(self, matrix: np.ndarray) -> np.ndarray:
        page = self._page_transform.get_matrix()[:2, :2]
        return self._origin_linear @ page @ matrix[:2, :2]


def _linear_scale(linear: np.ndarray) -> float:
    return float(math.sqrt(abs(np.linalg.det(linear))))
