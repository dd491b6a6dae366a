"""Rendering hints understood by the drawing context and document writers."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from enum import Enum
from typing import Any

from matplotlib import rcParams

__all__ = [
    "KEY_ELEMENT_TITLE",
    "KEY_TEXT_RENDERING_MODE",
    "TextRenderingMode",
    "VALUE_TEXT_RENDERING_MODE_TEXT",
    "VALUE_TEXT_RENDERING_MODE_VECTOR",
    "rc_overrides",
    "text_mode_for",
    "text_rc_params",
]


class TextRenderingMode(Enum):
    """How strings reach the document: glyph outlines or native text."""

    VECTOR = "vector"
    TEXT = "text"


KEY_TEXT_RENDERING_MODE = "text_rendering_mode"
KEY_ELEMENT_TITLE = "element_title"

VALUE_TEXT_RENDERING_MODE_VECTOR = TextRenderingMode.VECTOR
VALUE_TEXT_RENDERING_MODE_TEXT = TextRenderingMode.TEXT

# Font embedding per backend. Outlined strings never reach the font machinery,
# so the VECTOR entries only matter for text drawn by other means.
_FONTTYPE_PARAMS: dict[str, dict[TextRenderingMode, dict[str, Any]]] = {
    "eps": {
        TextRenderingMode.VECTOR: {"ps.fonttype": 3},
        TextRenderingMode.TEXT: {"ps.fonttype": 42},
    },
    "svg": {
        TextRenderingMode.VECTOR: {"svg.fonttype": "path"},
        TextRenderingMode.TEXT: {"svg.fonttype": "none"},
    },
    "pdf": {
        TextRenderingMode.VECTOR: {"pdf.fonttype": 3},
        TextRenderingMode.TEXT: {"pdf.fonttype": 42},
    },
}


def text_mode_for(use_vectorized_text: bool) -> TextRenderingMode:
    return TextRenderingMode.VECTOR if use_vectorized_text else TextRenderingMode.TEXT


def text_rc_params(fmt: str, mode: TextRenderingMode) -> dict[str, Any]:
    """Return the matplotlib rcParams a backend needs for ``mode``."""
    try:
        return dict(_FONTTYPE_PARAMS[fmt][mode])
    except KeyError:
        raise ValueError(f"Unsupported format/text mode: {fmt!r}/{mode!r}") from None


@contextmanager
def rc_overrides(params: Mapping[str, Any]) -> Iterator[None]:
    """Temporarily apply ``params`` to the global rcParams."""
    backup = {key: rcParams[key] for key in params}
    try:
        rcParams.update(params)
        yield
    finally:
        rcParams.update(backup)
