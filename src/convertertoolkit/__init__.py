# ConverterToolkit
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Export GUI panels to EPS, PDF and SVG through a shared drawing context."""

from importlib import import_module

from convertertoolkit.component import SourceBounds, VectorSource
from convertertoolkit.core.errors import (
    DocumentAssemblyError,
    ExportEncodingError,
    ExportError,
    ExportIOError,
)
from convertertoolkit.core.settings import ExportSettings, load_export_settings
from convertertoolkit.graphics import ColorMode, PageOrigin, TextRenderingMode, VectorGraphics
from convertertoolkit.layout import CompositeOffsets, composite_stacked_layout

__version__ = "1.0.0"

_UI_EXPORTS = {
    "ConverterDemoFrame": ("convertertoolkit.ui.demo_frame", "ConverterDemoFrame"),
    "ConverterDemoPanel": ("convertertoolkit.ui.demo_panel", "ConverterDemoPanel"),
    "TitledVectorizationPanel": (
        "convertertoolkit.ui.vectorization_panel",
        "TitledVectorizationPanel",
    ),
    "VectorizationPanel": ("convertertoolkit.ui.vectorization_panel", "VectorizationPanel"),
}


def __getattr__(name: str):
    if name in _UI_EXPORTS:
        module_name, attr = _UI_EXPORTS[name]
        module = import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'convertertoolkit' has no attribute {name!r}")


__all__ = [
    "ColorMode",
    "CompositeOffsets",
    "ConverterDemoFrame",
    "ConverterDemoPanel",
    "DocumentAssemblyError",
    "ExportEncodingError",
    "ExportError",
    "ExportIOError",
    "ExportSettings",
    "PageOrigin",
    "SourceBounds",
    "TextRenderingMode",
    "TitledVectorizationPanel",
    "VectorGraphics",
    "VectorSource",
    "VectorizationPanel",
    "composite_stacked_layout",
    "load_export_settings",
]
