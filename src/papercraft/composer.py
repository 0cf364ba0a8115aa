"""Assemble the draw list for each page of a paper configuration."""

from __future__ import annotations

from papercraft.background import background_tile_for
from papercraft.config import PaperConfig, PaperDimension, PatternType
from papercraft.dimensions import page_dimensions
from papercraft.models import Fill, Line, PageScene, PatternFill, PatternTile, Rect, SceneElement, Stroke, Text
from papercraft.patterns import pattern_tile_for

DEFAULT_PAGE_COLOR = "#ffffff"

MARGIN_BOX_STROKE = Stroke("#ef4444", 0.5, 1.0, "4")

CORNELL_CUE_OFFSET = 60.0
CORNELL_SUMMARY_OFFSET = 50.0
CORNELL_HEADER_OFFSET = 25.0
CORNELL_RULE_WIDTH = 2.0

PAGE_NUMBER_OFFSET = 10.0
PAGE_NUMBER_FILL = Fill("#64748b")
PAGE_NUMBER_FONT_SIZE = 12.0
PAGE_NUMBER_FONT_FAMILY = "sans-serif"


def content_rect(config: PaperConfig, dimensions: PaperDimension) -> tuple[float, float, float, float]:
    """Return ``(x, y, width, height)`` of the margin-bounded area.

    Width or height may be zero or negative when the margins meet or cross.
    """

    margins = config.margins
    return (
        margins.left,
        margins.top,
        dimensions.width - margins.left - margins.right,
        dimensions.height - margins.top - margins.bottom,
    )


def _cornell_rules(config: PaperConfig, dimensions: PaperDimension) -> list[Line]:
    margins = config.margins
    left = margins.left
    right = dimensions.width - margins.right
    top = margins.top
    bottom = dimensions.height - margins.bottom
    stroke = Stroke(config.stroke_color, CORNELL_RULE_WIDTH, config.opacity)

    cue_x = left + CORNELL_CUE_OFFSET
    summary_y = bottom - CORNELL_SUMMARY_OFFSET
    header_y = top + CORNELL_HEADER_OFFSET
    return [
        Line(cue_x, top, cue_x, bottom, stroke),
        Line(left, summary_y, right, summary_y, stroke),
        Line(left, header_y, right, header_y, stroke),
    ]


def compose_page(
    config: PaperConfig,
    page_index: int,
    dimensions: PaperDimension | None = None,
    pattern_tile: PatternTile | None = None,
    background_tile: PatternTile | None = None,
) -> PageScene:
    """Build the scene for the 1-based ``page_index`` of ``config``.

    Tiles not passed in are taken from the generator caches.
    """

    if dimensions is None:
        dimensions = page_dimensions(config)
    width, height = dimensions.width, dimensions.height

    background = config.background
    if background_tile is None:
        background_tile = background_tile_for(background)
    if pattern_tile is None:
        pattern_tile = pattern_tile_for(config)

    page_color = background.color if background is not None and background.color else DEFAULT_PAGE_COLOR
    elements: list[SceneElement] = [Rect(0, 0, width, height, fill=Fill(page_color))]

    if background_tile is not None:
        elements.append(PatternFill(0, 0, width, height, background_tile))

    if config.pattern == PatternType.CORNELL:
        elements.extend(_cornell_rules(config, dimensions))

    x, y, content_width, content_height = content_rect(config, dimensions)
    content_width = max(0.0, content_width)
    content_height = max(0.0, content_height)

    if config.pattern != PatternType.BLANK and pattern_tile is not None:
        elements.append(PatternFill(x, y, content_width, content_height, pattern_tile))

    if config.show_margin_box:
        elements.append(Rect(x, y, content_width, content_height, stroke=MARGIN_BOX_STROKE))

    watermark = config.watermark
    if watermark is not None and watermark.enabled:
        elements.append(
            Text(
                x=width / 2,
                y=height / 2,
                text=watermark.text,
                fill=Fill(watermark.color, watermark.opacity),
                font_size=watermark.font_size,
                baseline="middle",
                rotation=watermark.rotation,
                interactive=False,
            )
        )

    pages = config.pages
    if pages is not None and pages.show_numbers:
        elements.append(
            Text(
                x=width / 2,
                y=height - PAGE_NUMBER_OFFSET,
                text=str(pages.start_number + page_index - 1),
                fill=PAGE_NUMBER_FILL,
                font_size=PAGE_NUMBER_FONT_SIZE,
                font_family=PAGE_NUMBER_FONT_FAMILY,
            )
        )

    return PageScene(width=width, height=height, page_index=page_index, elements=tuple(elements))


def compose_document(config: PaperConfig) -> list[PageScene]:
    """One scene per page, in page order."""

    dimensions = page_dimensions(config)
    pattern_tile = pattern_tile_for(config)
    background_tile = background_tile_for(config.background)
    count = config.pages.count if config.pages is not None else 1
    return [
        compose_page(config, index, dimensions, pattern_tile, background_tile)
        for index in range(1, count + 1)
    ]
