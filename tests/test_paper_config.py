import pytest
from pydantic import ValidationError

from papercraft.config import (
    DEFAULT_CONFIG,
    THEME_PRESETS,
    BackgroundPattern,
    LineStyle,
    Orientation,
    PaperConfig,
    PaperSize,
    PatternType,
)


def test_paper_config_defaults() -> None:
    config = PaperConfig()
    assert config.name == "Default Lined"
    assert config.size == PaperSize.A4
    assert config.orientation == Orientation.PORTRAIT
    assert config.pattern == PatternType.LINED
    assert config.spacing == 10
    assert config.line_style == LineStyle.SOLID
    assert config.margins.top == 20
    assert config.background.color == "#ffffff"
    assert config.background.pattern == BackgroundPattern.NONE
    assert config.watermark.enabled is False
    assert config.watermark.rotation == -45
    assert config.pages.count == 1


def test_paper_config_is_immutable() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_CONFIG.spacing = 5


def test_paper_config_rejects_negative_margin() -> None:
    with pytest.raises(ValidationError):
        PaperConfig(margins={"top": -1, "bottom": 0, "left": 0, "right": 0})


def test_paper_config_requires_at_least_one_page() -> None:
    with pytest.raises(ValidationError):
        PaperConfig(pages={"count": 0})


def test_paper_config_accepts_camel_case_document_keys() -> None:
    config = PaperConfig.model_validate(
        {"strokeColor": "#123456", "showMarginBox": True, "pages": {"showNumbers": True, "startNumber": 4}}
    )
    assert config.stroke_color == "#123456"
    assert config.show_margin_box is True
    assert config.pages.start_number == 4


def test_with_margins_returns_new_value() -> None:
    updated = DEFAULT_CONFIG.with_margins(left=5, right=7)

    assert updated.margins.left == 5
    assert updated.margins.right == 7
    assert updated.margins.top == DEFAULT_CONFIG.margins.top
    assert DEFAULT_CONFIG.margins.left == 20


def test_nested_updates_leave_other_groups_untouched() -> None:
    updated = DEFAULT_CONFIG.with_watermark(enabled=True, text="Draft").with_pages(count=3)

    assert updated.watermark.enabled is True
    assert updated.watermark.text == "Draft"
    assert updated.pages.count == 3
    assert updated.background == DEFAULT_CONFIG.background
    assert DEFAULT_CONFIG.watermark.enabled is False


def test_with_theme_overwrites_only_colour_bundle() -> None:
    base = DEFAULT_CONFIG.with_background(pattern=BackgroundPattern.DOTS, pattern_opacity=0.3)
    themed = base.with_theme("night")
    preset = THEME_PRESETS["night"]

    assert themed.theme == "night"
    assert themed.stroke_color == preset.stroke_color
    assert themed.background.color == preset.bg_color
    assert themed.background.pattern_color == preset.pattern_color
    assert themed.background.pattern == BackgroundPattern.DOTS
    assert themed.background.pattern_opacity == 0.3
    assert themed.spacing == base.spacing
    assert themed.watermark == base.watermark


def test_with_unknown_theme_is_a_no_op() -> None:
    assert DEFAULT_CONFIG.with_theme("neon") is DEFAULT_CONFIG


def test_nested_updates_coerce_enum_strings() -> None:
    updated = DEFAULT_CONFIG.with_background(pattern="grid")

    assert updated.background.pattern is BackgroundPattern.GRID


@pytest.mark.parametrize(
    "update",
    [
        lambda config: config.with_pages(count=0),
        lambda config: config.with_margins(top=-30),
        lambda config: config.with_background(pattern_opacity=1.5),
        lambda config: config.with_watermark(font_size=0),
        lambda config: config.with_background(pattern="wavy"),
    ],
)
def test_nested_updates_are_validated(update) -> None:
    with pytest.raises(ValidationError):
        update(DEFAULT_CONFIG)


def test_revised_validates_top_level_fields() -> None:
    assert DEFAULT_CONFIG.revised(pattern="dot").pattern is PatternType.DOT

    with pytest.raises(ValidationError):
        DEFAULT_CONFIG.revised(spacing=0)
