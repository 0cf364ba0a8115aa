import pytest

from papercraft.composer import compose_document, compose_page, content_rect
from papercraft.config import DEFAULT_CONFIG, BackgroundPattern, PaperConfig, PaperSize, PatternType
from papercraft.dimensions import page_dimensions
from papercraft.models import Line, PatternFill, Rect, Text


def _grid_config(**overrides) -> PaperConfig:
    values = {
        "size": PaperSize.A4,
        "orientation": "portrait",
        "pattern": PatternType.GRID,
        "spacing": 5,
        "margins": {"top": 20, "bottom": 20, "left": 20, "right": 20},
    }
    values.update(overrides)
    return PaperConfig.model_validate(values)


def _fills(elements) -> list[PatternFill]:
    return [element for element in elements if isinstance(element, PatternFill)]


def test_a4_grid_scenario() -> None:
    config = _grid_config()
    scene = compose_page(config, 1)

    assert (scene.width, scene.height) == (210, 297)
    (fill,) = _fills(scene.elements)
    assert (fill.x, fill.y, fill.width, fill.height) == (20, 20, 170, 257)
    assert (fill.tile.width, fill.tile.height) == (5, 5)


def test_first_element_is_opaque_page_background() -> None:
    config = _grid_config().with_background(color="#fbf0d9")
    background = compose_page(config, 1).elements[0]

    assert isinstance(background, Rect)
    assert (background.x, background.y, background.width, background.height) == (0, 0, 210, 297)
    assert background.fill.color == "#fbf0d9"
    assert background.fill.opacity == 1.0


def test_empty_background_colour_defaults_to_white() -> None:
    config = _grid_config().with_background(color="")
    assert compose_page(config, 1).elements[0].fill.color == "#ffffff"


def test_background_texture_covers_whole_page_before_content() -> None:
    config = _grid_config().with_background(pattern=BackgroundPattern.DOTS)
    texture, content = _fills(compose_page(config, 1).elements)

    assert (texture.x, texture.y, texture.width, texture.height) == (0, 0, 210, 297)
    assert texture.tile.tile_id.startswith("bg-dots")
    assert content.tile.tile_id.startswith("pattern-grid")


def test_blank_pattern_has_no_content_fill() -> None:
    config = _grid_config(pattern=PatternType.BLANK, show_margin_box=True)
    scene = compose_page(config, 1)

    assert _fills(scene.elements) == []
    assert isinstance(scene.elements[-1], Rect)


def test_pattern_without_recipe_renders_as_blank() -> None:
    config = _grid_config(pattern=PatternType.CHILDREN_DRAWING)
    assert _fills(compose_page(config, 1).elements) == []


@pytest.mark.parametrize("margins", [{"left": 110, "right": 100}, {"top": 200, "bottom": 150}])
def test_crossing_margins_give_empty_content_region(margins) -> None:
    config = _grid_config().with_margins(**margins)
    x, y, width, height = content_rect(config, page_dimensions(config))
    assert width <= 0 or height <= 0

    (fill,) = _fills(compose_page(config, 1).elements)
    assert fill.width * fill.height == 0


def test_cornell_rules_sit_beneath_lined_fill() -> None:
    config = _grid_config(pattern=PatternType.CORNELL, stroke_color="#808080", opacity=0.8)
    elements = compose_page(config, 1).elements
    rules = [element for element in elements if isinstance(element, Line)]

    cue, summary, header = rules
    assert (cue.x1, cue.y1, cue.x2, cue.y2) == (80, 20, 80, 277)
    assert (summary.x1, summary.y1, summary.x2, summary.y2) == (20, 227, 190, 227)
    assert (header.x1, header.y1, header.x2, header.y2) == (20, 45, 190, 45)
    assert all(rule.stroke.width == 2 and rule.stroke.opacity == 0.8 for rule in rules)
    assert all(rule.stroke.color == "#808080" for rule in rules)

    fill_index = next(i for i, element in enumerate(elements) if isinstance(element, PatternFill))
    assert all(elements.index(rule) < fill_index for rule in rules)


def test_margin_box_is_drawn_over_pattern() -> None:
    elements = compose_page(_grid_config(show_margin_box=True), 1).elements
    box = elements[-1]

    assert isinstance(box, Rect)
    assert box.fill is None
    assert (box.stroke.color, box.stroke.width, box.stroke.dasharray) == ("#ef4444", 0.5, "4")
    assert (box.x, box.y, box.width, box.height) == (20, 20, 170, 257)
    assert isinstance(elements[-2], PatternFill)


def test_watermark_is_centred_and_rotated_about_page_centre() -> None:
    config = _grid_config().with_watermark(enabled=True, rotation=-45, text="Draft")
    (watermark,) = [element for element in compose_page(config, 1).elements if isinstance(element, Text)]

    assert (watermark.x, watermark.y) == (105, 148.5)
    assert watermark.rotation == -45
    assert watermark.interactive is False
    assert watermark.text == "Draft"


def test_page_numbers_offset_from_start_number() -> None:
    config = _grid_config().with_pages(count=3, show_numbers=True, start_number=7)
    scenes = compose_document(config)

    numbers = [[e for e in scene.elements if isinstance(e, Text)][0] for scene in scenes]
    assert [number.text for number in numbers] == ["7", "8", "9"]
    assert all((number.x, number.y) == (105, 287) for number in numbers)
    assert numbers[0].font_family == "sans-serif"


def test_compose_document_yields_one_scene_per_page_in_order() -> None:
    scenes = compose_document(DEFAULT_CONFIG.with_pages(count=3))

    assert [scene.page_index for scene in scenes] == [1, 2, 3]
    assert scenes[0].elements == scenes[2].elements


def test_compose_page_does_not_touch_config() -> None:
    config = _grid_config().with_watermark(enabled=True)
    snapshot = config.model_dump()
    compose_page(config, 2)

    assert config.model_dump() == snapshot


def test_texture_given_as_plain_string_still_composes() -> None:
    config = _grid_config().with_background(pattern="lines")
    texture, _ = _fills(compose_page(config, 1).elements)

    assert texture.tile.tile_id.startswith("bg-lines")
