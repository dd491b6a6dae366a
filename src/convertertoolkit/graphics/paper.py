"""Paper sizes in PostScript points (1/72 inch)."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "NA_LETTER_HEIGHT_POINTS",
    "NA_LETTER_WIDTH_POINTS",
    "PAPER_SIZES",
    "POINTS_PER_INCH",
    "PaperSize",
    "paper_size",
]

POINTS_PER_INCH = 72.0
_POINTS_PER_MM = POINTS_PER_INCH / 25.4

NA_LETTER_WIDTH_POINTS = 8.5 * POINTS_PER_INCH
NA_LETTER_HEIGHT_POINTS = 11.0 * POINTS_PER_INCH


@dataclass(frozen=True)
class PaperSize:
    name: str
    width: float
    height: float

    def landscape(self) -> "PaperSize":
        if self.width >= self.height:
            return self
        return PaperSize(f"{self.name}-landscape", self.height, self.width)


def _iso(name: str, width_mm: float, height_mm: float) -> PaperSize:
    return PaperSize(name, width_mm * _POINTS_PER_MM, height_mm * _POINTS_PER_MM)


PAPER_SIZES: dict[str, PaperSize] = {
    "letter": PaperSize("letter", NA_LETTER_WIDTH_POINTS, NA_LETTER_HEIGHT_POINTS),
    "legal": PaperSize("legal", 8.5 * POINTS_PER_INCH, 14.0 * POINTS_PER_INCH),
    "tabloid": PaperSize("tabloid", 11.0 * POINTS_PER_INCH, 17.0 * POINTS_PER_INCH),
    "a3": _iso("a3", 297.0, 420.0),
    "a4": _iso("a4", 210.0, 297.0),
    "a5": _iso("a5", 148.0, 210.0),
}


def paper_size(name: str) -> PaperSize:
    """Look up a paper preset; a ``-landscape`` suffix rotates it."""
    key = name.strip().lower()
    landscape = key.endswith("-landscape")
    if landscape:
        key = key[: -len("-landscape")]
    try:
        paper = PAPER_SIZES[key]
    except KeyError:
        raise ValueError(f"Unknown paper size: {name!r}") from None
    return paper.landscape() if landscape else paper
