"""Tileable pattern definitions, one geometry recipe per pattern family.

Every coordinate is in millimetres inside the tile. A tile is repeated from the
page origin across whatever rectangle it fills, so a recipe only has to draw
the part of the ruling that belongs to a single period.
"""

from __future__ import annotations

import hashlib
import logging
import math
from dataclasses import dataclass, fields
from functools import lru_cache
from typing import Callable

from papercraft.config import LineStyle, PaperConfig, PatternType
from papercraft.models import FULL, Circle, Fill, Line, PatternTile, Polyline, Primitive, Rect, Stroke, format_length

logger = logging.getLogger(__name__)

DASH_ARRAYS: dict[LineStyle, str | None] = {
    LineStyle.SOLID: None,
    LineStyle.DASHED: "4,4",
    LineStyle.DOTTED: "1,4",
}

GUIDE_DASH = "2,2"
CROSS_HALF_LENGTH = 1.0
MUSIC_STAFF_GAP = 2.0
GUITAR_TAB_GAP = 2.5
STORYBOARD_GUTTER = 10.0
STORYBOARD_ASPECT = 1.77
SEYES_GUIDE_WIDTH = 0.2
SEYES_GUIDE_OPACITY = 0.4


@dataclass(frozen=True)
class PatternKey:
    """Exactly the configuration fields that shape a main-pattern tile."""

    pattern: PatternType | str
    spacing: float
    stroke_color: str
    stroke_width: float
    opacity: float
    line_style: LineStyle | str

    @classmethod
    def from_config(cls, config: PaperConfig) -> "PatternKey":
        return cls(
            pattern=config.pattern,
            spacing=config.spacing,
            stroke_color=config.stroke_color,
            stroke_width=config.stroke_width,
            opacity=config.opacity,
            line_style=config.line_style,
        )

    @property
    def dasharray(self) -> str | None:
        return DASH_ARRAYS.get(self.line_style)

    def tile_id(self) -> str:
        raw = "|".join(_value(getattr(self, field.name)) for field in fields(self))
        digest = hashlib.sha1(raw.encode("utf-8")).hexdigest()[:10]
        return f"pattern-{_value(self.pattern)}-{digest}"

    def stroke(
        self,
        *,
        width_scale: float = 1.0,
        opacity_scale: float = 1.0,
        dasharray: str | None = None,
        opaque: bool = False,
    ) -> Stroke:
        """Stroke in the key colour; ``opaque`` ignores the configured opacity."""

        opacity = 1.0 if opaque else self.opacity * opacity_scale
        return Stroke(
            color=self.stroke_color,
            width=self.stroke_width * width_scale,
            opacity=opacity,
            dasharray=dasharray,
        )


def _value(item: PatternType | LineStyle | str) -> str:
    return item.value if hasattr(item, "value") else str(item)


def _tile(key: PatternKey, width, height, primitives: list[Primitive]) -> PatternTile:
    return PatternTile(tile_id=key.tile_id(), width=width, height=height, primitives=tuple(primitives))


def _path(*points: tuple[float, float], close: bool = False) -> str:
    head, *tail = points
    parts = [f"M {format_length(head[0])} {format_length(head[1])}"]
    if tail:
        parts.append("L " + " ".join(f"{format_length(x)} {format_length(y)}" for x, y in tail))
    if close:
        parts.append("Z")
    return " ".join(parts)


def _grid_corner(s: float) -> str:
    # Top and left edges only; neighbouring tiles close the cell.
    return _path((s, 0), (0, 0), (0, s))


def _lined(key: PatternKey) -> PatternTile:
    s = key.spacing
    return _tile(key, FULL, s, [Line(0, s, FULL, s, key.stroke(dasharray=key.dasharray))])


def _vertical_lined(key: PatternKey) -> PatternTile:
    s = key.spacing
    return _tile(key, s, FULL, [Line(s, 0, s, FULL, key.stroke(dasharray=key.dasharray))])


def _grid(key: PatternKey) -> PatternTile:
    s = key.spacing
    return _tile(key, s, s, [Polyline(_grid_corner(s), key.stroke(dasharray=key.dasharray))])


def _dot_radius(key: PatternKey) -> float:
    return max(0.5, key.stroke_width / 2)


def _dot(key: PatternKey) -> PatternTile:
    s = key.spacing
    fill = Fill(key.stroke_color, key.opacity)
    return _tile(key, s, s, [Circle(s / 2, s / 2, _dot_radius(key), fill)])


def _cross(key: PatternKey) -> PatternTile:
    s = key.spacing
    c = s / 2
    stroke = key.stroke()
    return _tile(
        key,
        s,
        s,
        [
            Line(c - CROSS_HALF_LENGTH, c, c + CROSS_HALF_LENGTH, c, stroke),
            Line(c, c - CROSS_HALF_LENGTH, c, c + CROSS_HALF_LENGTH, stroke),
        ],
    )


def _isometric(key: PatternKey) -> PatternTile:
    s = key.spacing
    h = s * math.sqrt(3) / 2
    fill = Fill(key.stroke_color, key.opacity)
    r = _dot_radius(key)
    centres = [(0, 0), (s / 2, h), (s, 0), (0, 2 * h), (s, 2 * h)]
    return _tile(key, s, 2 * h, [Circle(x, y, r, fill) for x, y in centres])


def _hexagonal(key: PatternKey) -> PatternTile:
    w = key.spacing
    side = w / math.sqrt(3)
    stroke = key.stroke()
    upper = _path(
        (w / 2, 0),
        (w, side / 2),
        (w, 1.5 * side),
        (w / 2, 2 * side),
        (0, 1.5 * side),
        (0, side / 2),
        close=True,
    )
    lower = " ".join(
        [
            _path((w / 2, 3 * side), (w, 2.5 * side), (w, 1.5 * side)),
            _path((0, 1.5 * side), (0, 2.5 * side), (w / 2, 3 * side)),
        ]
    )
    return _tile(key, w, 3 * side, [Polyline(upper, stroke), Polyline(lower, stroke)])


def _four_line(key: PatternKey) -> PatternTile:
    s = key.spacing
    gap = s / 3
    boundary = key.stroke()
    guide = key.stroke(width_scale=0.8, dasharray=GUIDE_DASH)
    return _tile(
        key,
        FULL,
        s,
        [
            Line(0, 0, FULL, 0, boundary),
            Line(0, gap, FULL, gap, guide),
            Line(0, 2 * gap, FULL, 2 * gap, guide),
            Line(0, s, FULL, s, boundary),
        ],
    )


def _seyes(key: PatternKey) -> PatternTile:
    s = key.spacing
    quarter = s / 4
    faint = Stroke(key.stroke_color, SEYES_GUIDE_WIDTH, SEYES_GUIDE_OPACITY)
    primitives: list[Primitive] = [Line(0, i * quarter, s, i * quarter, faint) for i in (1, 2, 3)]
    primitives.append(Polyline(_grid_corner(s), key.stroke()))
    return _tile(key, s, s, primitives)


def _staff(line_count: int, gap: float) -> Callable[[PatternKey], PatternTile]:
    def recipe(key: PatternKey) -> PatternTile:
        stroke = key.stroke()
        lines = [Line(0, i * gap, FULL, i * gap, stroke) for i in range(line_count)]
        return _tile(key, FULL, key.spacing, lines)

    return recipe


def _storyboard(key: PatternKey) -> PatternTile:
    box_height = max(0.0, key.spacing - STORYBOARD_GUTTER)
    box_width = box_height * STORYBOARD_ASPECT
    frame = Rect(0, 0, box_width, box_height, stroke=key.stroke(opaque=True))
    return _tile(key, box_width + STORYBOARD_GUTTER, key.spacing, [frame])


def _character_box(key: PatternKey) -> PatternTile:
    s = key.spacing
    half = s / 2
    primitives: list[Primitive] = [Rect(0, 0, s, s, stroke=key.stroke())]
    dashed_guide = key.stroke(width_scale=0.5, opacity_scale=0.7, dasharray=GUIDE_DASH)
    solid_guide = key.stroke(width_scale=0.5, opacity_scale=0.7)

    pattern = key.pattern
    if pattern in (PatternType.TIANZI, PatternType.MIZIGE):
        primitives.append(Line(0, half, s, half, dashed_guide))
        primitives.append(Line(half, 0, half, s, dashed_guide))
    if pattern == PatternType.MIZIGE:
        primitives.append(Line(0, 0, s, s, dashed_guide))
        primitives.append(Line(s, 0, 0, s, dashed_guide))
    elif pattern == PatternType.JIUGONGGE:
        for offset in (s / 3, 2 * s / 3):
            primitives.append(Line(offset, 0, offset, s, solid_guide))
        for offset in (s / 3, 2 * s / 3):
            primitives.append(Line(0, offset, s, offset, solid_guide))
    elif pattern in (PatternType.HUIGONGGE, PatternType.HARDPEN_HUIGONGGE):
        primitives.append(Rect(s / 4, s / 4, half, half, stroke=solid_guide))
    return _tile(key, s, s, primitives)


def _pinyin_tianzi(key: PatternKey) -> PatternTile:
    s = key.spacing
    row = s * 0.35
    box = s * 0.65
    thin = key.stroke(width_scale=0.5, opaque=True)
    thin_dashed = key.stroke(width_scale=0.5, dasharray=GUIDE_DASH, opaque=True)
    cross = key.stroke(width_scale=0.5, opacity_scale=0.7, dasharray=GUIDE_DASH)
    return _tile(
        key,
        box,
        s,
        [
            Line(0, row * 0.2, box, row * 0.2, thin),
            Line(0, row * 0.5, box, row * 0.5, thin_dashed),
            Line(0, row * 0.8, box, row * 0.8, thin_dashed),
            Line(0, row, box, row, thin),
            Rect(0, row, box, box, stroke=key.stroke(opaque=True)),
            Line(0, row + box / 2, box, row + box / 2, cross),
            Line(box / 2, row, box / 2, row + box, cross),
        ],
    )


def _composition(key: PatternKey) -> PatternTile:
    s = key.spacing
    side = s * 0.9
    offset = (s - side) / 2
    return _tile(key, s, s, [Rect(offset, offset, side, side, stroke=key.stroke())])


RECIPES: dict[PatternType, Callable[[PatternKey], PatternTile]] = {
    PatternType.LINED: _lined,
    PatternType.CORNELL: _lined,
    PatternType.VERTICAL_LINED: _vertical_lined,
    PatternType.GRID: _grid,
    PatternType.ARITHMETIC_PAPER: _grid,
    PatternType.DOT: _dot,
    PatternType.CROSS: _cross,
    PatternType.ISOMETRIC: _isometric,
    PatternType.HEXAGONAL: _hexagonal,
    PatternType.PINYIN: _four_line,
    PatternType.ENGLISH_PAPER: _four_line,
    PatternType.SEYES: _seyes,
    PatternType.MUSIC: _staff(5, MUSIC_STAFF_GAP),
    PatternType.GUITAR_TAB: _staff(6, GUITAR_TAB_GAP),
    PatternType.STORYBOARD: _storyboard,
    PatternType.TIANZI: _character_box,
    PatternType.MIZIGE: _character_box,
    PatternType.JIUGONGGE: _character_box,
    PatternType.HUIGONGGE: _character_box,
    PatternType.HARDPEN_HUIGONGGE: _character_box,
    PatternType.PINYIN_TIANZI: _pinyin_tianzi,
    PatternType.COMPOSITION_PAPER: _composition,
}


@lru_cache(maxsize=128)
def generate_pattern_tile(key: PatternKey) -> PatternTile | None:
    """Build the tile for ``key``; ``None`` means nothing is drawn (blank)."""

    recipe = RECIPES.get(key.pattern)
    if recipe is None:
        if key.pattern != PatternType.BLANK:
            logger.info("Pattern %r has no tile recipe, rendering as blank", _value(key.pattern))
        return None

    logger.debug("Generating tile for %s", key)
    return recipe(key)


def pattern_tile_for(config: PaperConfig) -> PatternTile | None:
    return generate_pattern_tile(PatternKey.from_config(config))
