"""Capability interface for anything that can be exported as vector graphics."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple, Protocol, runtime_checkable

if TYPE_CHECKING:
    from convertertoolkit.graphics.context import VectorGraphics

__all__ = ["SourceBounds", "VectorSource"]


class SourceBounds(NamedTuple):
    """Bounding box of a source in its own (y-down) coordinates."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@runtime_checkable
class VectorSource(Protocol):
    """A component that can replay its painting onto a drawing context.

    ``vectorize`` returns ``False`` when only part of the content could be
    rendered; exporters still write the document in that case.
    """

    title: str | None

    def vector_source_bounds(self) -> SourceBounds:
        ...

    def vectorize(self, graphics: "VectorGraphics") -> bool:
        ...
