"""Sample panel with a titled top region and a two-region bottom row."""

from __future__ import annotations

import logging
from typing import Any

from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import QCheckBox, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from convertertoolkit.component import SourceBounds
from convertertoolkit.graphics.context import VectorGraphics
from convertertoolkit.layout.compositor import (
    CompositeOffsets,
    composite_stacked_layout,
    stacked_layout_extent,
)
from convertertoolkit.ui.vectorization_panel import (
    TitledVectorizationPanel,
    VectorizationPanel,
)

log = logging.getLogger(__name__)

__all__ = ["ConverterDemoPanel"]


def _label_font(pixel_size: int, *, bold: bool = False, italic: bool = False) -> QFont:
    font = QFont("SansSerif")
    font.setPixelSize(pixel_size)
    font.setBold(bold)
    font.setItalic(italic)
    return font


def _region(text: str, font: QFont, option: str, parent: QWidget) -> VectorizationPanel:
    panel = VectorizationPanel(parent)
    layout = QVBoxLayout(panel)
    layout.setContentsMargins(10, 10, 10, 10)
    layout.setSpacing(6)

    label = QLabel(text, panel)
    label.setFont(font)
    layout.addWidget(label)
    layout.addWidget(QCheckBox(option, panel))
    return panel


class ConverterDemoPanel(TitledVectorizationPanel):
    """Shows "Goodbye" above "Cruel" and "World"; exports through the compositor."""

    def __init__(self, parent: QWidget | None = None, offsets: CompositeOffsets | None = None) -> None:
        super().__init__(parent)
        self.offsets = offsets or CompositeOffsets()

        self.top_panel = _region("Goodbye", _label_font(48, bold=True), "Maybe", self)

        self.bottom_panel = QWidget(self)
        self.bottom_left_panel = _region("Cruel", _label_font(36, italic=True), "Yes", self.bottom_panel)
        self.bottom_right_panel = _region("World", _label_font(36, italic=True), "No", self.bottom_panel)

        row = QHBoxLayout(self.bottom_panel)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(0)
        row.addWidget(self.bottom_left_panel)
        row.addWidget(self.bottom_right_panel)
        row.addStretch(1)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(int(self.offsets.row_gap))
        layout.addWidget(self.top_panel)
        layout.addWidget(self.bottom_panel)
        layout.addStretch(1)

    # ------------------------------------------------------------------
    def set_foreground_from_background(self, back_color: Any) -> None:
        super().set_foreground_from_background(back_color)
        for panel in (self.top_panel, self.bottom_left_panel, self.bottom_right_panel):
            panel.set_foreground_from_background(back_color)
        self.bottom_panel.setPalette(self.palette())

    def _ensure_layout(self) -> None:
        layout = self.layout()
        if layout is not None:
            layout.activate()
        self.bottom_panel.layout().activate()

    def vector_source_bounds(self) -> SourceBounds:
        self._ensure_layout()
        width, height = stacked_layout_extent(
            self, self.top_panel, self.bottom_left_panel, self.bottom_right_panel, self.offsets
        )
        return SourceBounds(0.0, 0.0, float(width), float(height))

    def vectorize(self, graphics: VectorGraphics) -> bool:
        self._ensure_layout()
        return composite_stacked_layout(
            graphics,
            self,
            self.top_panel,
            self.bottom_left_panel,
            self.bottom_right_panel,
            self.offsets,
        )
