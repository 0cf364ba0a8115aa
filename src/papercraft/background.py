"""Page-wide decorative textures drawn beneath the main pattern."""

from __future__ import annotations

import hashlib
from functools import lru_cache

from papercraft.config import BackgroundConfig, BackgroundPattern
from papercraft.models import FULL, Circle, Fill, Line, PatternTile, Polyline, Stroke

TEXTURE_PERIOD = 5.0
TEXTURE_STROKE_WIDTH = 0.2
TEXTURE_DOT_RADIUS = 0.5


def _texture_id(pattern: BackgroundPattern, color: str, opacity: float) -> str:
    digest = hashlib.sha1(f"{pattern.value}|{color}|{opacity}".encode("utf-8")).hexdigest()[:10]
    return f"bg-{pattern.value}-{digest}"


@lru_cache(maxsize=32)
def generate_background_tile(pattern: BackgroundPattern, color: str, opacity: float) -> PatternTile | None:
    s = TEXTURE_PERIOD
    stroke = Stroke(color, TEXTURE_STROKE_WIDTH, opacity)

    if pattern == BackgroundPattern.GRID:
        width, height = s, s
        primitives = (Polyline(f"M {s:g} 0 L 0 0 0 {s:g}", stroke),)
    elif pattern == BackgroundPattern.DOTS:
        width, height = s, s
        primitives = (Circle(s / 2, s / 2, TEXTURE_DOT_RADIUS, Fill(color, opacity)),)
    elif pattern == BackgroundPattern.LINES:
        width, height = FULL, s
        primitives = (Line(0, s, FULL, s, stroke),)
    else:
        return None

    return PatternTile(
        tile_id=_texture_id(pattern, color, opacity),
        width=width,
        height=height,
        primitives=primitives,
    )


def background_tile_for(background: BackgroundConfig | None) -> PatternTile | None:
    if background is None:
        return None
    return generate_background_tile(background.pattern, background.pattern_color, background.pattern_opacity)
