# ConverterToolkit
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Main window that exports the demo panel to EPS, PDF and SVG."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt5.QtCore import QSettings, Qt
from PyQt5.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from convertertoolkit import eps, pdf, svg
from convertertoolkit.core.settings import ExportSettings, load_export_settings
from convertertoolkit.ui.demo_panel import ConverterDemoPanel

log = logging.getLogger(__name__)

__all__ = ["ConverterDemoFrame"]

SETTINGS_ORGANIZATION = "ConverterToolkit"
SETTINGS_APPLICATION = "ConverterDemo"
LAST_DIRECTORY_KEY = "export/lastDirectory"

EPS_TITLE = "Fake EPS Title"
PDF_TITLE = "Fake PDF Title"
SVG_TITLE = "Fake SVG Title"

_FILTERS = {
    "eps": "Encapsulated PostScript (*.eps)",
    "pdf": "PDF Documents (*.pdf)",
    "svg": "SVG Images (*.svg)",
}


class ConverterDemoFrame(QMainWindow):
    """Hosts a :class:`ConverterDemoPanel` and one export button per format."""

    def __init__(
        self,
        parent: QWidget | None = None,
        settings: ExportSettings | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Converter Demo")
        self.export_settings = settings or load_export_settings()

        self.panel = ConverterDemoPanel(self)
        self.panel.set_foreground_from_background(Qt.white)

        self.eps_button = QPushButton("Export EPS", self)
        self.pdf_button = QPushButton("Export PDF", self)
        self.svg_button = QPushButton("Export SVG", self)
        self.eps_button.clicked.connect(self._on_export_eps)
        self.pdf_button.clicked.connect(self._on_export_pdf)
        self.svg_button.clicked.connect(self._on_export_svg)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        for button in (self.eps_button, self.pdf_button, self.svg_button):
            buttons.addWidget(button)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.addWidget(self.panel, 1)
        layout.addLayout(buttons)
        self.setCentralWidget(central)

        self.resize(420, 280)

    # ------------------------------------------------------------------
    def export_to_eps(self, path: str | Path, title: str | None = EPS_TITLE) -> bool:
        s = self.export_settings
        self.panel.set_title(title)
        return eps.create_document(
            path,
            self.panel,
            title,
            s.creator,
            s.page_width,
            s.page_height,
            s.color_mode,
            s.use_vectorized_text,
        )

    def export_to_pdf(self, path: str | Path, title: str | None = PDF_TITLE) -> bool:
        s = self.export_settings
        self.panel.set_title(title)
        return pdf.create_document(
            path,
            self.panel,
            title,
            s.creator,
            s.page_width,
            s.page_height,
            s.color_mode,
            s.use_vectorized_text,
        )

    def export_to_svg(self, path: str | Path, title: str | None = SVG_TITLE) -> bool:
        s = self.export_settings
        self.panel.set_title(title)
        return svg.create_document(
            path,
            self.panel,
            title,
            s.page_width,
            s.page_height,
            s.color_mode,
            s.use_vectorized_text,
        )

    # ------------------------------------------------------------------
    def _on_export_eps(self) -> None:
        self._export_with_dialog("eps", self.export_to_eps)

    def _on_export_pdf(self) -> None:
        self._export_with_dialog("pdf", self.export_to_pdf)

    def _on_export_svg(self) -> None:
        self._export_with_dialog("svg", self.export_to_svg)

    def _export_with_dialog(self, fmt: str, export) -> None:
        path = self._choose_path(fmt)
        if not path:
            return
        if export(path):
            self.statusBar().showMessage(f"✓ Saved {Path(path).name}", 3000)
            return
        QMessageBox.warning(
            self,
            "Export Failed",
            f"The panel could not be fully exported to {fmt.upper()}.\n\n"
            f"{path}\n\nSee the application log for details.",
        )

    def _choose_path(self, fmt: str) -> str | None:
        settings = QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)
        last_dir = settings.value(LAST_DIRECTORY_KEY, str(Path.home()), type=str)
        suggested = str(Path(last_dir) / f"converter-demo.{fmt}")

        path, _ = QFileDialog.getSaveFileName(
            self,
            f"Export {fmt.upper()}",
            suggested,
            _FILTERS[fmt],
        )
        if not path:
            return None

        path_obj = Path(path).expanduser()
        if path_obj.suffix.lower() != f".{fmt}":
            path_obj = path_obj.with_suffix(f".{fmt}")
        settings.setValue(LAST_DIRECTORY_KEY, str(path_obj.parent))
        log.debug("Export target for %s: %s", fmt, path_obj)
        return str(path_obj)
