"""Vector primitives, tiles and page scenes produced by papercraft."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Union

from pydantic import BaseModel, Field

FULL = "100%"

# Absolute length in mm, or FULL to span the whole page along that axis.
Length = Union[float, str]


@dataclass(frozen=True)
class Stroke:
    color: str
    width: float
    opacity: float = 1.0
    dasharray: str | None = None


@dataclass(frozen=True)
class Fill:
    color: str
    opacity: float = 1.0


@dataclass(frozen=True)
class Line:
    kind: ClassVar[str] = "line"

    x1: Length
    y1: Length
    x2: Length
    y2: Length
    stroke: Stroke


@dataclass(frozen=True)
class Polyline:
    """Open or closed outline given as SVG path data."""

    kind: ClassVar[str] = "path"

    d: str
    stroke: Stroke


@dataclass(frozen=True)
class Circle:
    kind: ClassVar[str] = "circle"

    cx: float
    cy: float
    r: float
    fill: Fill


@dataclass(frozen=True)
class Rect:
    kind: ClassVar[str] = "rect"

    x: Length
    y: Length
    width: Length
    height: Length
    stroke: Stroke | None = None
    fill: Fill | None = None


Primitive = Union[Line, Polyline, Circle, Rect]


@dataclass(frozen=True)
class PatternTile:
    """Smallest repeating unit of a pattern, anchored at the page origin."""

    tile_id: str
    width: Length
    height: Length
    primitives: tuple[Primitive, ...]


@dataclass(frozen=True)
class PatternFill:
    """A rectangle painted by repeating ``tile`` across it."""

    kind: ClassVar[str] = "pattern_fill"

    x: Length
    y: Length
    width: Length
    height: Length
    tile: PatternTile


@dataclass(frozen=True)
class Text:
    kind: ClassVar[str] = "text"

    x: float
    y: float
    text: str
    fill: Fill
    font_size: float
    font_family: str | None = None
    baseline: str | None = None
    rotation: float = 0.0
    interactive: bool = True


SceneElement = Union[Line, Polyline, Circle, Rect, PatternFill, Text]


@dataclass(frozen=True)
class PageScene:
    """Ordered draw list for one page; later elements paint over earlier ones."""

    width: float
    height: float
    page_index: int
    elements: tuple[SceneElement, ...]

    @property
    def tiles(self) -> list[PatternTile]:
        seen: set[str] = set()
        tiles: list[PatternTile] = []
        for element in self.elements:
            if isinstance(element, PatternFill) and element.tile.tile_id not in seen:
                seen.add(element.tile.tile_id)
                tiles.append(element.tile)
        return tiles


class ExportReport(BaseModel):
    """Summary returned by export and print runs."""

    format: str
    pages: int
    outputs: list[Path] = Field(default_factory=list)


def format_length(value: Length) -> str:
    """Format a coordinate for SVG output; percentage strings pass through."""

    if isinstance(value, str):
        return value
    text = f"{float(value):.4f}".rstrip("0").rstrip(".")
    return text if text not in ("", "-0") else "0"
