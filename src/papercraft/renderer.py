"""SVG and HTML rendering for composed page scenes."""

from __future__ import annotations

from functools import lru_cache
from importlib.resources import files
from typing import Sequence

from jinja2 import Environment, Template
from markupsafe import Markup

from papercraft.models import PageScene, format_length


@lru_cache(maxsize=None)
def _template(name: str) -> Template:
    template_source = files("papercraft.templates").joinpath(name).read_text(encoding="utf-8")
    environment = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)
    environment.filters["num"] = format_length
    return environment.from_string(template_source)


def render_scene_svg(scene: PageScene, *, width: str | None = None, height: str | None = None) -> str:
    """Render one scene as a standalone SVG document in millimetre user units.

    ``width``/``height`` set the outer size; by default the physical size in mm.
    """

    return _template("page.svg.j2").render(
        scene=scene,
        width=width or f"{format_length(scene.width)}mm",
        height=height or f"{format_length(scene.height)}mm",
    )


def render_canvas_html(scene: PageScene, width_px: int, height_px: int) -> str:
    """Wrap a scene in a white page of exactly ``width_px`` x ``height_px``."""

    svg = render_scene_svg(scene, width=f"{width_px}px", height=f"{height_px}px")
    return _template("canvas.html.j2").render(svg=Markup(svg), width_px=width_px, height_px=height_px)


def render_print_html(scenes: Sequence[PageScene]) -> str:
    """Render every scene as its own printed sheet, sized to the first page."""

    first = scenes[0]
    pages = [Markup(render_scene_svg(scene)) for scene in scenes]
    return _template("print.html.j2").render(pages=pages, width_mm=first.width, height_mm=first.height)
