"""Exception types raised by the document writers."""

from __future__ import annotations

__all__ = [
    "DocumentAssemblyError",
    "ExportEncodingError",
    "ExportError",
    "ExportIOError",
]


class ExportError(Exception):
    """Base class for failures while exporting a vector document."""

    def __init__(self, fmt: str, message: str) -> None:
        super().__init__(f"{fmt.upper()} export failed: {message}")
        self.format = fmt


class ExportIOError(ExportError):
    """The destination could not be opened, written or flushed."""


class ExportEncodingError(ExportError):
    """The serialised document could not be represented in the sink encoding."""


class DocumentAssemblyError(ExportError):
    """The drawing library failed while building or serialising the document."""
