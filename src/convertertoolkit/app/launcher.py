"""Application bootstrap for the converter demo window."""

from __future__ import annotations

import logging
import os
import sys

from PyQt5.QtCore import QCoreApplication, Qt
from PyQt5.QtWidgets import QApplication

from convertertoolkit.core.settings import ExportSettings
from convertertoolkit.ui.demo_frame import ConverterDemoFrame

log = logging.getLogger(__name__)

# Ensure HiDPI scaling is enabled before the QApplication is instantiated
os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")
os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")


class ConverterDemoLauncher:
    """Create the Qt application, style it, and show the demo frame."""

    def __init__(self, argv: list[str] | None = None, settings: ExportSettings | None = None) -> None:
        QCoreApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
        QCoreApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)
        QCoreApplication.setApplicationName("ConverterToolkit")

        self.app = QApplication.instance() or QApplication(list(sys.argv if argv is None else argv))
        self.app.setStyle("Fusion")

        self.window = ConverterDemoFrame(settings=settings)
        self.window.show()
        log.info("Demo frame started")

    # ------------------------------------------------------------------
    def run(self) -> None:
        sys.exit(self.app.exec_())


__all__ = ["ConverterDemoLauncher"]
