"""Built-in template catalog."""

from __future__ import annotations

from papercraft.config import DEFAULT_CONFIG, THEME_PRESETS, LineStyle, Margins, PaperConfig, PatternType


class UnknownTemplateError(LookupError):
    """Raised when a template id is not in the catalog."""


def _margins(top: float, bottom: float, left: float, right: float) -> Margins:
    return Margins(top=top, bottom=bottom, left=left, right=right)


_STANDARD_MARGINS = _margins(25, 25, 20, 20)
_PRACTICE_MARGINS = _margins(25, 25, 25, 25)
_CALLIGRAPHY_MARGINS = _margins(9, 9, 9, 9)
_CARD_MARGINS = _margins(15, 15, 15, 15)

_VINTAGE_BACKGROUND = DEFAULT_CONFIG.background.revised(
    color="#FFF8E6", pattern_color="#E7BC91", pattern_opacity=0.1
)


def _template(template_id: str, name: str, pattern: PatternType, **fields) -> PaperConfig:
    return DEFAULT_CONFIG.revised(id=template_id, name=name, pattern=pattern, **fields)


TEMPLATES: tuple[PaperConfig, ...] = (
    # Standard and academic
    _template(
        "lined-basic", "Standard Notebook", PatternType.LINED,
        spacing=8, stroke_color="#808080", stroke_width=0.5, margins=_STANDARD_MARGINS,
    ),
    _template(
        "cornell", "Cornell Notes", PatternType.CORNELL,
        spacing=7, stroke_color="#808080", stroke_width=0.5, margins=_STANDARD_MARGINS,
    ),
    _template(
        "grid-math", "Math Grid", PatternType.GRID,
        spacing=5, stroke_color="#a0a0a0", stroke_width=0.3,
    ),
    _template(
        "dot-paper", "Dot Paper", PatternType.DOT,
        spacing=5, stroke_color="#a0a0a0", stroke_width=0.3,
    ),
    _template(
        "english-paper", "English Practice", PatternType.ENGLISH_PAPER,
        spacing=5, stroke_color="#ff6b6b", stroke_width=0.5, margins=_PRACTICE_MARGINS,
    ),
    # Specialized
    _template(
        "arithmetic", "Arithmetic", PatternType.ARITHMETIC_PAPER,
        spacing=5, stroke_color="#ff6b6b", stroke_width=0.5, margins=_PRACTICE_MARGINS,
    ),
    _template(
        "composition", "Composition", PatternType.COMPOSITION_PAPER,
        spacing=8, stroke_color="#ff6b6b", stroke_width=0.5, margins=_PRACTICE_MARGINS,
    ),
    _template(
        "music-staff", "Music Staff", PatternType.MUSIC,
        spacing=7, stroke_color="#505050", stroke_width=0.5, theme="classic", margins=_STANDARD_MARGINS,
    ),
    _template(
        "guitar-tab", "Guitar Tab", PatternType.GUITAR_TAB,
        spacing=25, stroke_color="#333333", stroke_width=0.6, margins=_margins(15, 15, 15, 15),
    ),
    _template(
        "seyes", "Seyes (French)", PatternType.SEYES,
        spacing=8, stroke_color="#9c9c9c", stroke_width=0.3, theme="classic",
    ),
    # Chinese calligraphy and practice
    _template(
        "tianzi", "Tianzi", PatternType.TIANZI,
        spacing=20, stroke_color="#8B4513", stroke_width=0.6, theme="vintage",
        background=_VINTAGE_BACKGROUND, margins=_CALLIGRAPHY_MARGINS,
    ),
    _template(
        "mizige", "Mizige", PatternType.MIZIGE,
        spacing=20, stroke_color="#8B4513", stroke_width=0.6, theme="vintage",
        background=_VINTAGE_BACKGROUND, margins=_CALLIGRAPHY_MARGINS,
    ),
    _template(
        "jiugongge", "Jiugongge", PatternType.JIUGONGGE,
        spacing=10, stroke_color="#8B4513", stroke_width=0.6, theme="vintage",
        background=_VINTAGE_BACKGROUND, margins=_CALLIGRAPHY_MARGINS,
    ),
    _template(
        "huigongge", "Huigongge", PatternType.HUIGONGGE,
        spacing=25, stroke_color="#8B4513", stroke_width=0.6, theme="vintage",
        background=_VINTAGE_BACKGROUND, margins=_CALLIGRAPHY_MARGINS,
    ),
    _template(
        "hardpen-huigongge", "Hardpen Huigongge", PatternType.HARDPEN_HUIGONGGE,
        spacing=25, stroke_color="#ff0000", stroke_width=0.4, theme="vintage",
        background=_VINTAGE_BACKGROUND, margins=_CALLIGRAPHY_MARGINS,
    ),
    _template(
        "calligraphy", "Calligraphy Paper", PatternType.MIZIGE,
        spacing=10, stroke_color="#c0c0c0", stroke_width=0.4, line_style=LineStyle.DASHED, theme="vintage",
        background=DEFAULT_CONFIG.background.revised(color="#fff8e1"),
        margins=_margins(10, 9, 9, 9),
    ),
    _template(
        "pinyin-paper", "Chinese Pinyin", PatternType.PINYIN,
        spacing=20, stroke_color="#ff6b6b", stroke_width=0.5, margins=_PRACTICE_MARGINS,
    ),
    _template(
        "pinyin-tianzi", "Pinyin Tianzi", PatternType.PINYIN_TIANZI,
        spacing=20, stroke_color="#ff6b6b", stroke_width=0.5, margins=_CARD_MARGINS,
    ),
    _template(
        "chinese-preview-card", "Chinese Preview Card", PatternType.TIANZI,
        spacing=20, stroke_color="#6b7280", stroke_width=0.5, margins=_CARD_MARGINS,
    ),
    # Creative and design
    _template(
        "children_drawing", "Children Drawing Paper", PatternType.CHILDREN_DRAWING,
        spacing=10, stroke_color="#808080", stroke_width=0.5, theme="creative",
    ),
    _template(
        "storyboard", "Storyboard", PatternType.STORYBOARD,
        spacing=50, stroke_color="#808080", stroke_width=0.5,
    ),
    _template(
        "isometric", "Isometric Dot", PatternType.ISOMETRIC,
        spacing=10, stroke_color="#a0a0a0", stroke_width=0.3,
    ),
    _template(
        "hexagonal", "Hexagonal", PatternType.HEXAGONAL,
        spacing=15, stroke_color="#a0a0a0", stroke_width=0.3,
    ),
    _template(
        "cross-grid", "Cross Grid", PatternType.CROSS,
        spacing=10, stroke_color="#808080", stroke_width=0.4,
        background=DEFAULT_CONFIG.background.revised(pattern_opacity=0.1),
        margins=_CALLIGRAPHY_MARGINS,
    ),
    _template(
        "vertical-lined", "Vertical Lined", PatternType.VERTICAL_LINED,
        spacing=8, stroke_color="#6b7280", stroke_width=0.5, margins=_PRACTICE_MARGINS,
    ),
    _template(
        "minimal_journal", "Minimal Journal", PatternType.LINED,
        spacing=8, stroke_color="#909090", stroke_width=0.4, theme="minimalist",
        background=DEFAULT_CONFIG.background.revised(
            color=THEME_PRESETS["minimalist"].bg_color, pattern_opacity=0.1
        ),
        margins=_margins(30, 30, 25, 25),
    ),
    _template(
        "practice_paper", "Practice Paper", PatternType.LINED,
        spacing=8, stroke_color="#6b7280", stroke_width=0.5, line_style=LineStyle.DASHED,
        margins=_PRACTICE_MARGINS,
    ),
)


def get_template(template_id: str) -> PaperConfig:
    for template in TEMPLATES:
        if template.id == template_id:
            return template
    raise UnknownTemplateError(f"Unknown template id: {template_id}")


def select_template(template_id: str, current_id: str) -> PaperConfig:
    """Return a copy of a catalog template keyed to the caller's configuration id."""

    return get_template(template_id).model_copy(update={"id": current_id})
