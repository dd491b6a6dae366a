"""Plumbing shared by the EPS, SVG and PDF exporters.

Sinks are either filesystem paths, which are opened and closed here, or
already-open streams, which are written and flushed but left open.
"""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import IO, Union

from convertertoolkit.core.errors import (
    DocumentAssemblyError,
    ExportEncodingError,
    ExportError,
    ExportIOError,
)

log = logging.getLogger(__name__)

__all__ = [
    "Sink",
    "assembling",
    "describe_sink",
    "guarded_export",
    "report_render",
    "write_bytes",
    "write_text",
]

Sink = Union[str, "os.PathLike[str]", IO[str], IO[bytes]]


def describe_sink(sink: Sink) -> str:
    if isinstance(sink, (str, os.PathLike)):
        return os.fspath(sink)
    name = getattr(sink, "name", None)
    return str(name) if isinstance(name, str) else f"<{type(sink).__name__}>"


@contextmanager
def assembling(fmt: str) -> Iterator[None]:
    """Translate library failures during document assembly into ExportError."""
    try:
        yield
    except ExportError:
        raise
    except UnicodeError as exc:
        raise ExportEncodingError(fmt, str(exc)) from exc
    except Exception as exc:
        raise DocumentAssemblyError(fmt, f"{type(exc).__name__}: {exc}") from exc


def write_text(sink: Sink, content: str, fmt: str, encoding: str = "utf-8") -> None:
    """Write a text document as ``encoding`` bytes.

    Text streams backed by a binary buffer (files opened in text mode) get the
    bytes on that buffer, whatever encoding the stream was opened with. Purely
    in-memory text streams such as ``io.StringIO`` receive the string as is.
    """
    try:
        if isinstance(sink, io.TextIOBase):
            buffer = getattr(sink, "buffer", None)
            if buffer is None:
                sink.write(content)
                sink.flush()
                return
            sink.flush()
            sink = buffer
        data = content.encode(encoding)
    except UnicodeError as exc:
        raise ExportEncodingError(fmt, str(exc)) from exc
    except OSError as exc:
        raise ExportIOError(fmt, f"could not write {describe_sink(sink)}: {exc}") from exc
    write_bytes(sink, data, fmt)


def write_bytes(sink: Sink, data: bytes, fmt: str) -> None:
    if isinstance(sink, io.TextIOBase):
        raise ExportIOError(fmt, f"{describe_sink(sink)} is a text stream; a binary sink is required")
    try:
        if isinstance(sink, (str, os.PathLike)):
            with open(sink, "wb") as handle:
                handle.write(data)
        else:
            sink.write(data)
            sink.flush()
    except OSError as exc:
        raise ExportIOError(fmt, f"could not write {describe_sink(sink)}: {exc}") from exc


def report_render(fmt: str, rendered: bool, sink: Sink) -> None:
    if rendered:
        log.info("Exported %s document to %s", fmt.upper(), describe_sink(sink))
    else:
        log.warning(
            "Exported %s document to %s, but the source rendered only partially",
            fmt.upper(),
            describe_sink(sink),
        )


def guarded_export(fmt: str, writer: Callable[..., bool], *args, **kwargs) -> bool:
    """Run ``writer`` and collapse any ExportError into ``False``."""
    try:
        return writer(*args, **kwargs)
    except ExportError:
        log.error("%s export failed", fmt.upper(), exc_info=True)
        return False
