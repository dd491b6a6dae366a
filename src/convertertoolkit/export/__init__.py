"""Sink handling and error translation shared by the format exporters."""

from convertertoolkit.export.base import (
    Sink,
    assembling,
    describe_sink,
    guarded_export,
    report_render,
    write_bytes,
    write_text,
)

__all__ = [
    "Sink",
    "assembling",
    "describe_sink",
    "guarded_export",
    "report_render",
    "write_bytes",
    "write_text",
]
