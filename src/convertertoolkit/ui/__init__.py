"""PyQt5 panels and the demo window."""

from convertertoolkit.ui.demo_frame import ConverterDemoFrame
from convertertoolkit.ui.demo_panel import ConverterDemoPanel
from convertertoolkit.ui.vectorization_panel import (
    TitledVectorizationPanel,
    VectorizationPanel,
)

__all__ = [
    "ConverterDemoFrame",
    "ConverterDemoPanel",
    "TitledVectorizationPanel",
    "VectorizationPanel",
]
