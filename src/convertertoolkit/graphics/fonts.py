"""Toolkit-neutral font description used by the drawing context."""

from __future__ import annotations

from dataclasses import dataclass

from matplotlib.font_manager import FontProperties

__all__ = ["FontSpec"]

# Logical family names used by GUI toolkits, mapped to matplotlib generics.
_GENERIC_FAMILIES = {
    "sansserif": "sans-serif",
    "sans-serif": "sans-serif",
    "sans": "sans-serif",
    "dialog": "sans-serif",
    "helvetica": "sans-serif",
    "serif": "serif",
    "times": "serif",
    "monospace": "monospace",
    "monospaced": "monospace",
    "dialoginput": "monospace",
    "courier": "monospace",
}


@dataclass(frozen=True)
class FontSpec:
    """Font request in source units.

    ``size`` is measured in the same units as the source's coordinates, so it
    scales with the page transform exactly like the geometry around it.
    """

    family: str = "sans-serif"
    size: float = 12.0
    weight: str = "normal"
    style: str = "normal"

    def families(self) -> list[str]:
        key = self.family.replace(" ", "").lower()
        generic = _GENERIC_FAMILIES.get(key)
        if generic is not None:
            return [generic]
        return [self.family, "sans-serif"]

    def to_font_properties(self, size: float | None = None) -> FontProperties:
        return FontProperties(
            family=self.families(),
            size=self.size if size is None else size,
            weight=self.weight,
            style=self.style,
        )
