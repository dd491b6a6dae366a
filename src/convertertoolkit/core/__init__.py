"""Errors, settings and logging set-up shared across the toolkit."""

from convertertoolkit.core.errors import (
    DocumentAssemblyError,
    ExportEncodingError,
    ExportError,
    ExportIOError,
)
from convertertoolkit.core.settings import ExportSettings, load_export_settings

__all__ = [
    "DocumentAssemblyError",
    "ExportEncodingError",
    "ExportError",
    "ExportIOError",
    "ExportSettings",
    "load_export_settings",
]
