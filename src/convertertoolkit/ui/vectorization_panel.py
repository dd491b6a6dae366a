# ConverterToolkit
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Qt panels that replay their widgets onto a vector drawing context.

Qt cannot paint into a matplotlib figure, so instead of hooking ``paintEvent``
each panel walks its visible child widgets and re-issues what they show as
drawing-context primitives: backgrounds, label text, check/radio indicators
and push-button frames.
"""

from __future__ import annotations

import logging
from typing import Any

from PyQt5.QtCore import QPoint, Qt
from PyQt5.QtGui import QColor, QFont, QFontInfo, QFontMetrics, QPalette
from PyQt5.QtWidgets import (
    QAbstractButton,
    QCheckBox,
    QLabel,
    QRadioButton,
    QStyle,
    QWidget,
)

from convertertoolkit.component import SourceBounds
from convertertoolkit.graphics.color import RGBA, foreground_from_background
from convertertoolkit.graphics.context import VectorGraphics
from convertertoolkit.graphics.fonts import FontSpec
from convertertoolkit.layout.compositor import TITLE_PADDING_BOTTOM

log = logging.getLogger(__name__)

__all__ = [
    "TitledVectorizationPanel",
    "VectorizationPanel",
    "as_qcolor",
    "font_spec_from_qfont",
    "qcolor_to_rgba",
]


def qcolor_to_rgba(color: QColor) -> RGBA:
    r, g, b, a = color.getRgbF()
    return (r, g, b, a)


def as_qcolor(color: Any) -> QColor:
    """Accept a QColor, a Qt global colour or an RGBA float tuple."""
    if isinstance(color, QColor):
        return QColor(color)
    if isinstance(color, tuple):
        return QColor.fromRgbF(*color)
    return QColor(color)


def font_spec_from_qfont(font: QFont) -> FontSpec:
    """Describe ``font`` in pixels, the unit widget geometry is measured in."""
    return FontSpec(
        family=font.family(),
        size=float(QFontInfo(font).pixelSize()),
        weight="bold" if font.bold() else "normal",
        style="italic" if font.italic() else "normal",
    )


def _has(alignment: Qt.Alignment, flag: Qt.AlignmentFlag) -> bool:
    return bool(int(alignment) & int(flag))


class VectorizationPanel(QWidget):
    """A plain container whose contents can be exported as vector graphics."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.title: str | None = None
        self.setAutoFillBackground(True)

    # ------------------------------------------------------------------
    def background_color(self) -> QColor:
        return self.palette().color(QPalette.Window)

    def set_foreground_from_background(self, back_color: Any) -> None:
        """Set the background and a foreground that always contrasts with it."""
        background = as_qcolor(back_color)
        foreground = as_qcolor(foreground_from_background(qcolor_to_rgba(background)))
        palette = self.palette()
        palette.setColor(QPalette.Window, background)
        for role in (QPalette.WindowText, QPalette.Text, QPalette.ButtonText):
            palette.setColor(role, foreground)
        self.setPalette(palette)

    # ------------------------------------------------------------------
    def vector_source_bounds(self) -> SourceBounds:
        return SourceBounds(0.0, 0.0, float(self.width()), float(self.height()))

    def vectorize(self, graphics: VectorGraphics) -> bool:
        with graphics.state():
            graphics.set_background(qcolor_to_rgba(self.background_color()))
            graphics.clear_rect(0, 0, self.width(), self.height())
            return self._vectorize_children(graphics, self)

    # ------------------------------------------------------------------
    def _vectorize_children(self, graphics: VectorGraphics, container: QWidget) -> bool:
        for child in container.children():
            if not isinstance(child, QWidget) or not child.isVisibleTo(self):
                continue
            origin = child.mapTo(self, QPoint(0, 0))
            with graphics.state():
                graphics.translate(origin.x(), origin.y())
                if isinstance(child, VectorizationPanel):
                    if not child.vectorize(graphics):
                        return False
                    continue
                self._vectorize_widget(graphics, child)
            if not self._vectorize_children(graphics, child):
                return False
        return True

    def _vectorize_widget(self, graphics: VectorGraphics, widget: QWidget) -> None:
        if isinstance(widget, QLabel):
            self._vectorize_label(graphics, widget)
        elif isinstance(widget, (QCheckBox, QRadioButton)):
            self._vectorize_toggle(graphics, widget)
        elif isinstance(widget, QAbstractButton):
            self._vectorize_button(graphics, widget)
        elif widget.autoFillBackground():
            graphics.set_background(qcolor_to_rgba(widget.palette().color(QPalette.Window)))
            graphics.clear_rect(0, 0, widget.width(), widget.height())

    def _vectorize_label(self, graphics: VectorGraphics, label: QLabel) -> None:
        lines = label.text().splitlines()
        if not lines:
            return
        metrics = QFontMetrics(label.font())
        rect = label.contentsRect()
        alignment = label.alignment()
        block_height = metrics.lineSpacing() * (len(lines) - 1) + metrics.height()

        if _has(alignment, Qt.AlignTop):
            top = rect.y()
        elif _has(alignment, Qt.AlignBottom):
            top = rect.y() + rect.height() - block_height
        else:
            top = rect.y() + (rect.height() - block_height) / 2.0

        graphics.set_font(font_spec_from_qfont(label.font()))
        graphics.set_color(qcolor_to_rgba(label.palette().color(QPalette.WindowText)))
        for index, line in enumerate(lines):
            advance = metrics.horizontalAdvance(line)
            if _has(alignment, Qt.AlignHCenter):
                x = rect.x() + (rect.width() - advance) / 2.0
            elif _has(alignment, Qt.AlignRight):
                x = rect.x() + rect.width() - advance
            else:
                x = rect.x()
            baseline = top + index * metrics.lineSpacing() + metrics.ascent()
            graphics.draw_string(line, x, baseline)

    def _vectorize_toggle(self, graphics: VectorGraphics, button: QAbstractButton) -> None:
        style = button.style()
        radio = isinstance(button, QRadioButton)
        if radio:
            width = style.pixelMetric(QStyle.PM_ExclusiveIndicatorWidth, None, button)
            height = style.pixelMetric(QStyle.PM_ExclusiveIndicatorHeight, None, button)
            spacing = style.pixelMetric(QStyle.PM_RadioButtonLabelSpacing, None, button)
        else:
            width = style.pixelMetric(QStyle.PM_IndicatorWidth, None, button)
            height = style.pixelMetric(QStyle.PM_IndicatorHeight, None, button)
            spacing = style.pixelMetric(QStyle.PM_CheckBoxLabelSpacing, None, button)

        top = (button.height() - height) / 2.0
        graphics.set_color(qcolor_to_rgba(button.palette().color(QPalette.WindowText)))
        graphics.set_line_width(1.0)
        if radio:
            graphics.draw_oval(0, top, width, height)
            if button.isChecked():
                graphics.fill_oval(width * 0.3, top + height * 0.3, width * 0.4, height * 0.4)
        else:
            graphics.draw_rect(0, top, width, height)
            if button.isChecked():
                graphics.draw_polyline(
                    (width * 0.2, width * 0.42, width * 0.8),
                    (top + height * 0.5, top + height * 0.75, top + height * 0.25),
                )

        self._draw_button_text(graphics, button, width + spacing, centered=False)

    def _vectorize_button(self, graphics: VectorGraphics, button: QAbstractButton) -> None:
        graphics.set_color(qcolor_to_rgba(button.palette().color(QPalette.ButtonText)))
        graphics.set_line_width(1.0)
        graphics.draw_rect(0.5, 0.5, button.width() - 1, button.height() - 1)
        self._draw_button_text(graphics, button, 0, centered=True)

    def _draw_button_text(
        self, graphics: VectorGraphics, button: QAbstractButton, x: float, *, centered: bool
    ) -> None:
        text = button.text().replace("&&", "\0").replace("&", "").replace("\0", "&")
        if not text:
            return
        metrics = QFontMetrics(button.font())
        if centered:
            x = (button.width() - metrics.horizontalAdvance(text)) / 2.0
        baseline = (button.height() - metrics.height()) / 2.0 + metrics.ascent()
        graphics.set_font(font_spec_from_qfont(button.font()))
        graphics.draw_string(text, x, baseline)


class TitledVectorizationPanel(VectorizationPanel):
    """A panel that exports a centred title above its content."""

    TITLE_PADDING_BOTTOM = TITLE_PADDING_BOTTOM

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._title_font = QFont("SansSerif")
        self._title_font.setPixelSize(18)
        self._title_font.setBold(True)

    def set_title(self, title: str | None) -> None:
        self.title = title

    def title_offset_y(self) -> int:
        """Height taken by the title, or 0 when there is none."""
        if not self.title:
            return 0
        return QFontMetrics(self._title_font).height()

    def vectorize_title(self, graphics: VectorGraphics) -> bool:
        if not self.title:
            return True
        metrics = QFontMetrics(self._title_font)
        x = (self.width() - metrics.horizontalAdvance(self.title)) / 2.0
        with graphics.state():
            graphics.set_font(font_spec_from_qfont(self._title_font))
            graphics.set_color(qcolor_to_rgba(self.palette().color(QPalette.WindowText)))
            graphics.draw_string(self.title, x, metrics.ascent())
        return True

    def vector_source_bounds(self) -> SourceBounds:
        adjustment = self.title_offset_y() + self.TITLE_PADDING_BOTTOM
        return SourceBounds(0.0, 0.0, float(self.width()), float(self.height() + adjustment))

    def vectorize(self, graphics: VectorGraphics) -> bool:
        self.vectorize_title(graphics)
        with graphics.state():
            graphics.translate(0, self.title_offset_y() + self.TITLE_PADDING_BOTTOM)
            return super().vectorize(graphics)
