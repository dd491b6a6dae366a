"""Colour handling for vector export: colour modes and contrast helpers."""

from __future__ import annotations

from enum import Enum
from typing import Any

from matplotlib.colors import to_rgba

__all__ = [
    "BLACK",
    "WHITE",
    "ColorMode",
    "RGBA",
    "apply_color_mode",
    "foreground_from_background",
    "luma",
    "to_grayscale",
]

RGBA = tuple[float, float, float, float]

WHITE: RGBA = (1.0, 1.0, 1.0, 1.0)
BLACK: RGBA = (0.0, 0.0, 0.0, 1.0)

# Rec. 601 weights, as used by PostScript's setgray conversions.
_LUMA_WEIGHTS = (0.299, 0.587, 0.114)


class ColorMode(Enum):
    """Colour space the exported document is written in."""

    RGB = "rgb"
    GRAYSCALE = "grayscale"


def luma(color: Any) -> float:
    """Return the perceived brightness of ``color`` in the range 0..1."""
    r, g, b, _ = to_rgba(color)
    return _LUMA_WEIGHTS[0] * r + _LUMA_WEIGHTS[1] * g + _LUMA_WEIGHTS[2] * b


def to_grayscale(color: Any) -> RGBA:
    grey = luma(color)
    alpha = to_rgba(color)[3]
    return (grey, grey, grey, alpha)


def apply_color_mode(color: Any, mode: ColorMode) -> RGBA:
    """Resolve ``color`` to RGBA and convert it for the given colour mode."""
    if mode is ColorMode.GRAYSCALE:
        return to_grayscale(color)
    return to_rgba(color)


def foreground_from_background(background: Any) -> RGBA:
    """Pick black or white so text never disappears into the background."""
    return BLACK if luma(background) >= 0.5 else WHITE
