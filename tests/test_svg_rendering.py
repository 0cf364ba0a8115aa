from xml.etree import ElementTree

from papercraft.composer import compose_document, compose_page
from papercraft.config import DEFAULT_CONFIG, BackgroundPattern, LineStyle, PatternType
from papercraft.models import format_length
from papercraft.renderer import render_canvas_html, render_print_html, render_scene_svg

SVG_NS = "{http://www.w3.org/2000/svg}"


def _parse(svg: str) -> ElementTree.Element:
    return ElementTree.fromstring(svg)


def test_format_length_trims_trailing_zeros() -> None:
    assert format_length(5.0) == "5"
    assert format_length(0.25) == "0.25"
    assert format_length(8.660254) == "8.6603"
    assert format_length(-0.00001) == "0"
    assert format_length("100%") == "100%"


def test_svg_uses_millimetre_user_space() -> None:
    config = DEFAULT_CONFIG.model_copy(update={"pattern": PatternType.GRID, "spacing": 5})
    root = _parse(render_scene_svg(compose_page(config, 1)))

    assert root.get("viewBox") == "0 0 210 297"
    assert root.get("width") == "210mm"
    assert root.get("height") == "297mm"


def test_svg_defines_each_tile_once_and_references_it() -> None:
    config = DEFAULT_CONFIG.model_copy(update={"pattern": PatternType.GRID, "spacing": 5})
    config = config.with_background(pattern=BackgroundPattern.GRID)
    svg = render_scene_svg(compose_page(config, 1))
    root = _parse(svg)

    patterns = root.findall(f"{SVG_NS}defs/{SVG_NS}pattern")
    assert len(patterns) == 2
    assert all(pattern.get("patternUnits") == "userSpaceOnUse" for pattern in patterns)
    assert all((pattern.get("x"), pattern.get("y")) == ("0", "0") for pattern in patterns)
    for pattern in patterns:
        assert f'fill="url(#{pattern.get("id")})"' in svg


def test_full_span_background_line_keeps_percent_width() -> None:
    config = DEFAULT_CONFIG.with_background(pattern=BackgroundPattern.LINES)
    svg = render_scene_svg(compose_page(config, 1))

    assert 'x2="100%"' in svg


def test_watermark_rotates_about_page_centre_and_ignores_pointer() -> None:
    config = DEFAULT_CONFIG.with_watermark(enabled=True, text="Draft")
    root = _parse(render_scene_svg(compose_page(config, 1)))

    (text,) = root.findall(f"{SVG_NS}text")
    assert text.text == "Draft"
    assert text.get("transform") == "rotate(-45, 105, 148.5)"
    assert text.get("pointer-events") == "none"
    assert text.get("dominant-baseline") == "middle"


def test_watermark_text_is_escaped() -> None:
    config = DEFAULT_CONFIG.with_watermark(enabled=True, text='<b>"Tom & Jerry"</b>')
    svg = render_scene_svg(compose_page(config, 1))

    assert "<b>" not in svg
    (text,) = _parse(svg).findall(f"{SVG_NS}text")
    assert text.text == '<b>"Tom & Jerry"</b>'


def test_page_number_text_is_selectable() -> None:
    config = DEFAULT_CONFIG.with_pages(show_numbers=True, start_number=3)
    (text,) = _parse(render_scene_svg(compose_page(config, 2))).findall(f"{SVG_NS}text")

    assert text.text == "4"
    assert text.get("pointer-events") is None
    assert text.get("transform") is None


def test_dashed_line_style_reaches_svg() -> None:
    config = DEFAULT_CONFIG.model_copy(update={"line_style": LineStyle.DASHED})
    assert 'stroke-dasharray="4,4"' in render_scene_svg(compose_page(config, 1))


def test_canvas_html_sizes_svg_in_pixels() -> None:
    html = render_canvas_html(compose_page(DEFAULT_CONFIG, 1), 2481, 3508)

    assert 'width="2481px"' in html
    assert 'height="3508px"' in html
    assert 'viewBox="0 0 210 297"' in html
    assert "&lt;svg" not in html


def test_print_html_puts_each_page_on_its_own_sheet() -> None:
    scenes = compose_document(DEFAULT_CONFIG.with_pages(count=3, show_numbers=True))
    html = render_print_html(scenes)

    assert "@page { size: 210mm 297mm; margin: 0; }" in html
    assert html.count('<div class="sheet">') == 3
    assert html.count("<svg") == 3
