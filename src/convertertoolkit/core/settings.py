"""Export defaults, overridable from the environment.

``CTK_PAPER`` names a paper preset (``letter``, ``a4``, ``a4-landscape``...).
``CTK_FEATURES`` is a comma separated flag list such as ``native_text`` or
``grayscale,!native_text``; ``name=off`` style values are accepted too.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from convertertoolkit.graphics.color import ColorMode
from convertertoolkit.graphics.paper import (
    NA_LETTER_HEIGHT_POINTS,
    NA_LETTER_WIDTH_POINTS,
    paper_size,
)

log = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_CREATOR",
    "ExportSettings",
    "FEATURES_ENV",
    "FLAG_GRAYSCALE",
    "FLAG_NATIVE_TEXT",
    "PAPER_ENV",
    "load_export_settings",
    "parse_features",
]

PAPER_ENV = "CTK_PAPER"
FEATURES_ENV = "CTK_FEATURES"

FLAG_NATIVE_TEXT = "native_text"
FLAG_GRAYSCALE = "grayscale"

DEFAULT_CREATOR = "Saved from ConverterDemoFrame"

_FALSE_VALUES = {"0", "false", "off", "no", "disable", "disabled"}
_TRUE_VALUES = {"1", "true", "on", "yes", "enable", "enabled"}


@dataclass(frozen=True)
class ExportSettings:
    page_width: float = NA_LETTER_WIDTH_POINTS
    page_height: float = NA_LETTER_HEIGHT_POINTS
    color_mode: ColorMode = ColorMode.RGB
    use_vectorized_text: bool = True
    creator: str | None = DEFAULT_CREATOR


def _normalise(name: str) -> str:
    return name.strip().lower().replace("-", "_")


def _tokenise(raw: str) -> Iterable[str]:
    for token in raw.split(","):
        clean = token.strip()
        if clean:
            yield clean


def parse_features(raw: str) -> dict[str, bool]:
    """Parse a ``CTK_FEATURES`` value into a flag map."""
    features: dict[str, bool] = {}
    for token in _tokenise(raw):
        if token.startswith(("!", "-")):
            features[_normalise(token[1:])] = False
        elif "=" in token:
            key, value = token.split("=", 1)
            value = value.strip().lower()
            if value in _TRUE_VALUES:
                features[_normalise(key)] = True
            elif value in _FALSE_VALUES:
                features[_normalise(key)] = False
            else:
                log.warning("Ignoring feature %r with unrecognised value %r", key, value)
        else:
            features[_normalise(token)] = True
    return features


def load_export_settings(environ: Mapping[str, str] | None = None) -> ExportSettings:
    """Build :class:`ExportSettings` from ``environ`` (``os.environ`` by default)."""
    env = os.environ if environ is None else environ

    paper_name = env.get(PAPER_ENV, "letter")
    try:
        paper = paper_size(paper_name)
    except ValueError:
        log.warning("Unknown paper size %r in %s; using letter", paper_name, PAPER_ENV)
        paper = paper_size("letter")

    features = parse_features(env.get(FEATURES_ENV, ""))
    settings = ExportSettings(
        page_width=paper.width,
        page_height=paper.height,
        color_mode=ColorMode.GRAYSCALE if features.get(FLAG_GRAYSCALE) else ColorMode.RGB,
        use_vectorized_text=not features.get(FLAG_NATIVE_TEXT, False),
    )
    log.debug("Export settings: %s", settings)
    return settings
