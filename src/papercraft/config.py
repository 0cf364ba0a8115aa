"""Configuration models and enums for papercraft."""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PaperSize(str, Enum):
    A3 = "A3"
    A4 = "A4"
    A5 = "A5"
    B4 = "B4"
    B5 = "B5"
    LETTER = "Letter"
    LEGAL = "Legal"
    TABLOID = "Tabloid"
    EXECUTIVE = "Executive"
    CUSTOM = "custom"


class Orientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class PatternType(str, Enum):
    BLANK = "blank"
    LINED = "lined"
    VERTICAL_LINED = "vertical_lined"
    GRID = "grid"
    DOT = "dot"
    ISOMETRIC = "isometric"
    HEXAGONAL = "hexagonal"
    CROSS = "cross"
    CORNELL = "cornell"
    SEYES = "seyes"
    MUSIC = "music"
    GUITAR_TAB = "guitar_tab"
    STORYBOARD = "storyboard"
    PINYIN = "pinyin"
    PINYIN_TIANZI = "pinyin_tianzi"
    COMPOSITION_PAPER = "composition_paper"
    ARITHMETIC_PAPER = "arithmetic_paper"
    ENGLISH_PAPER = "english_paper"
    MIZIGE = "mizige"
    HUIGONGGE = "huigongge"
    JIUGONGGE = "jiugongge"
    TIANZI = "tianzi"
    HARDPEN_HUIGONGGE = "hardpen_huigongge"
    CHILDREN_DRAWING = "children_drawing"


class BackgroundPattern(str, Enum):
    NONE = "none"
    GRID = "grid"
    DOTS = "dots"
    LINES = "lines"


class LineStyle(str, Enum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


_DocumentT = TypeVar("_DocumentT", bound="_Document")


class _Document(BaseModel):
    """Frozen model serialized with the camelCase keys of the settings document."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def revised(self: _DocumentT, **changes: Any) -> _DocumentT:
        """Return a copy with ``changes`` applied, validated like a fresh document."""

        return self.model_validate({**self.model_dump(), **changes})


class PaperDimension(_Document):
    width: float = Field(gt=0)
    height: float = Field(gt=0)


class Margins(_Document):
    top: float = Field(default=20.0, ge=0)
    bottom: float = Field(default=20.0, ge=0)
    left: float = Field(default=20.0, ge=0)
    right: float = Field(default=20.0, ge=0)


class BackgroundConfig(_Document):
    color: str = "#ffffff"
    pattern: BackgroundPattern = BackgroundPattern.NONE
    pattern_color: str = "#e2e8f0"
    pattern_opacity: float = Field(default=0.5, ge=0, le=1)


class WatermarkConfig(_Document):
    enabled: bool = False
    text: str = "PaperCraft"
    color: str = "#cbd5e1"
    opacity: float = Field(default=0.2, ge=0, le=1)
    font_size: float = Field(default=48, gt=0)
    rotation: float = -45


class PageConfig(_Document):
    count: int = Field(default=1, ge=1)
    show_numbers: bool = False
    start_number: int = 1


class ThemePreset(BaseModel):
    """Stroke/background/texture colour bundle applied as one unit."""

    model_config = ConfigDict(frozen=True)

    stroke_color: str
    bg_color: str
    pattern_color: str


THEME_PRESETS: dict[str, ThemePreset] = {
    "default": ThemePreset(stroke_color="#94a3b8", bg_color="#ffffff", pattern_color="#e2e8f0"),
    "night": ThemePreset(stroke_color="#475569", bg_color="#1e293b", pattern_color="#334155"),
    "sepia": ThemePreset(stroke_color="#5c5346", bg_color="#fbf0d9", pattern_color="#e6dec8"),
    "vintage": ThemePreset(stroke_color="#857F72", bg_color="#F4F1EA", pattern_color="#D3CEC4"),
    "pastel": ThemePreset(stroke_color="#bcece0", bg_color="#fff5f7", pattern_color="#fce7f3"),
    "classic": ThemePreset(stroke_color="#000000", bg_color="#ffffff", pattern_color="#d1d5db"),
    "minimalist": ThemePreset(stroke_color="#e2e8f0", bg_color="#ffffff", pattern_color="#f1f5f9"),
    "ocean": ThemePreset(stroke_color="#38bdf8", bg_color="#f0f9ff", pattern_color="#bae6fd"),
    "forest": ThemePreset(stroke_color="#4ade80", bg_color="#f0fdf4", pattern_color="#bbf7d0"),
    "sunset": ThemePreset(stroke_color="#fb923c", bg_color="#fff7ed", pattern_color="#fed7aa"),
    "tech": ThemePreset(stroke_color="#22d3ee", bg_color="#0f172a", pattern_color="#1e293b"),
    "elegant": ThemePreset(stroke_color="#78716c", bg_color="#fafaf9", pattern_color="#e7e5e4"),
    "creative": ThemePreset(stroke_color="#a855f7", bg_color="#faf5ff", pattern_color="#e9d5ff"),
}


def new_config_id(prefix: str) -> str:
    """Mint a fresh opaque configuration id such as ``imported-3f2a...``."""

    return f"{prefix}-{uuid.uuid4().hex[:12]}"


class PaperConfig(_Document):
    """Everything needed to render one paper document.

    Instances are immutable; the ``with_*`` helpers return a new value with one
    nested group replaced so a composer never sees a snapshot change under it.
    """

    id: str = "default"
    name: str = "Default Lined"
    size: PaperSize = PaperSize.A4
    custom_dimensions: PaperDimension | None = PaperDimension(width=210, height=297)
    orientation: Orientation = Orientation.PORTRAIT
    margins: Margins = Field(default_factory=Margins)
    pattern: PatternType = PatternType.LINED
    spacing: float = Field(default=10.0, gt=0)
    stroke_width: float = Field(default=1.0, ge=0)
    stroke_color: str = THEME_PRESETS["default"].stroke_color
    line_style: LineStyle = LineStyle.SOLID
    opacity: float = Field(default=1.0, ge=0, le=1)
    show_margin_box: bool = False
    background: BackgroundConfig = Field(default_factory=BackgroundConfig)
    watermark: WatermarkConfig = Field(default_factory=WatermarkConfig)
    pages: PageConfig = Field(default_factory=PageConfig)
    theme: str | None = "default"

    def with_margins(self, **changes: float) -> "PaperConfig":
        return self.revised(margins=self.margins.revised(**changes))

    def with_background(self, **changes) -> "PaperConfig":
        return self.revised(background=self.background.revised(**changes))

    def with_watermark(self, **changes) -> "PaperConfig":
        return self.revised(watermark=self.watermark.revised(**changes))

    def with_pages(self, **changes) -> "PaperConfig":
        return self.revised(pages=self.pages.revised(**changes))

    def with_theme(self, theme_key: str) -> "PaperConfig":
        """Apply a theme preset; unknown keys leave the configuration untouched."""

        preset = THEME_PRESETS.get(theme_key)
        if preset is None:
            return self
        updated = self.with_background(color=preset.bg_color, pattern_color=preset.pattern_color)
        return updated.revised(theme=theme_key, stroke_color=preset.stroke_color)


DEFAULT_CONFIG = PaperConfig()
