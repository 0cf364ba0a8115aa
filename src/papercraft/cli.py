"""Typer CLI entrypoint for papercraft."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from papercraft.builder import ExportError, ExportFormat, export_config, print_config
from papercraft.canvas import CanvasError, open_canvas
from papercraft.catalog import TEMPLATES, UnknownTemplateError, select_template
from papercraft.composer import compose_page
from papercraft.config import DEFAULT_CONFIG, THEME_PRESETS, PaperConfig, new_config_id
from papercraft.documents import ConfigImportError, export_settings, load_config_file
from papercraft.models import ExportReport
from papercraft.renderer import render_scene_svg
from papercraft.settings import PaperCraftSettings
from papercraft.store import SavedTemplateStore, TemplateStoreError

app = typer.Typer(help="Render printable paper templates to PNG, JPEG and PDF.", no_args_is_help=True)

TEMPLATE_OPTION = typer.Option(None, "--template", "-t", help="Catalog or saved template id.")
CONFIG_OPTION = typer.Option(None, "--config", exists=True, readable=True, dir_okay=False)
THEME_OPTION = typer.Option(None, help="Theme preset applied on top of the template.")
PAGES_OPTION = typer.Option(None, min=1, help="Number of pages.")
PAGE_NUMBERS_OPTION = typer.Option(False, "--page-numbers", help="Print page numbers.")
WATERMARK_OPTION = typer.Option(None, help="Enable a watermark with this text.")
MARGIN_BOX_OPTION = typer.Option(False, "--margin-box", help="Outline the content area.")


def _fail(message: str, code: int) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(code=code)


def _resolve_config(template: str | None, config_file: Path | None, store: SavedTemplateStore) -> PaperConfig:
    if template is not None and config_file is not None:
        raise _fail("Use either --template or --config, not both.", 2)

    if config_file is not None:
        try:
            return load_config_file(config_file)
        except ConfigImportError as exc:
            raise _fail(f"Import failed: {exc}", 2) from exc

    if template is None:
        return DEFAULT_CONFIG

    try:
        return select_template(template, new_config_id("custom"))
    except UnknownTemplateError:
        pass

    try:
        saved = store.get(template)
    except TemplateStoreError as exc:
        raise _fail(str(exc), 1) from exc
    if saved is None:
        raise _fail(f"Unknown template id: {template}", 2)
    return saved


def _apply_overrides(
    config: PaperConfig,
    *,
    theme: str | None = None,
    pages: int | None = None,
    page_numbers: bool = False,
    watermark: str | None = None,
    margin_box: bool = False,
) -> PaperConfig:
    if theme is not None:
        if theme not in THEME_PRESETS:
            raise _fail(f"Unknown theme: {theme}", 2)
        config = config.with_theme(theme)
    if pages is not None:
        config = config.with_pages(count=pages)
    if page_numbers:
        config = config.with_pages(show_numbers=True)
    if watermark is not None:
        config = config.with_watermark(enabled=True, text=watermark)
    if margin_box:
        config = config.revised(show_margin_box=True)
    return config


def _echo_report(report: ExportReport) -> None:
    typer.echo(f"Rendered {report.pages} page(s) as {report.format}.")
    for path in report.outputs:
        typer.echo(f"Output: {path}")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v")) -> None:
    """papercraft command group."""

    level = logging.DEBUG if verbose else PaperCraftSettings().log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def templates() -> None:
    """List the built-in templates."""

    for template in TEMPLATES:
        typer.echo(f"{template.id:<24} {template.name:<26} {template.pattern.value}")


@app.command()
def themes() -> None:
    """List the theme presets."""

    for key, preset in THEME_PRESETS.items():
        typer.echo(f"{key:<12} stroke={preset.stroke_color} background={preset.bg_color} texture={preset.pattern_color}")


@app.command()
def export(
    template: str | None = TEMPLATE_OPTION,
    config_file: Path | None = CONFIG_OPTION,
    export_format: ExportFormat = typer.Option(ExportFormat.PDF, "--format", "-f"),
    output_dir: Path | None = typer.Option(None, file_okay=False),
    theme: str | None = THEME_OPTION,
    pages: int | None = PAGES_OPTION,
    page_numbers: bool = PAGE_NUMBERS_OPTION,
    watermark: str | None = WATERMARK_OPTION,
    margin_box: bool = MARGIN_BOX_OPTION,
) -> None:
    """Export a template as PNG/JPEG (first page) or a multi-page PDF at 300 DPI."""

    settings = PaperCraftSettings()
    config = _resolve_config(template, config_file, SavedTemplateStore(settings.store_path))
    config = _apply_overrides(
        config,
        theme=theme,
        pages=pages,
        page_numbers=page_numbers,
        watermark=watermark,
        margin_box=margin_box,
    )

    try:
        with open_canvas(headless=settings.headless) as canvas:
            report = export_config(config, export_format, canvas, output_dir or settings.output_dir)
    except (ExportError, CanvasError) as exc:
        raise _fail(f"Export failed: {exc}", 1) from exc

    _echo_report(report)


@app.command("print")
def print_pages(
    output: Path = typer.Option(..., dir_okay=False),
    template: str | None = TEMPLATE_OPTION,
    config_file: Path | None = CONFIG_OPTION,
    theme: str | None = THEME_OPTION,
    pages: int | None = PAGES_OPTION,
    page_numbers: bool = PAGE_NUMBERS_OPTION,
    watermark: str | None = WATERMARK_OPTION,
    margin_box: bool = MARGIN_BOX_OPTION,
) -> None:
    """Print the vector pages to a PDF through the browser print pipeline."""

    settings = PaperCraftSettings()
    config = _resolve_config(template, config_file, SavedTemplateStore(settings.store_path))
    config = _apply_overrides(
        config,
        theme=theme,
        pages=pages,
        page_numbers=page_numbers,
        watermark=watermark,
        margin_box=margin_box,
    )

    try:
        with open_canvas(headless=settings.headless) as canvas:
            report = print_config(config, canvas, output)
    except (ExportError, CanvasError) as exc:
        raise _fail(f"Print failed: {exc}", 1) from exc

    _echo_report(report)


@app.command()
def svg(
    output: Path = typer.Option(..., dir_okay=False),
    page: int = typer.Option(1, min=1),
    template: str | None = TEMPLATE_OPTION,
    config_file: Path | None = CONFIG_OPTION,
    theme: str | None = THEME_OPTION,
    page_numbers: bool = PAGE_NUMBERS_OPTION,
    watermark: str | None = WATERMARK_OPTION,
    margin_box: bool = MARGIN_BOX_OPTION,
) -> None:
    """Write one page as an SVG document."""

    settings = PaperCraftSettings()
    config = _resolve_config(template, config_file, SavedTemplateStore(settings.store_path))
    config = _apply_overrides(
        config,
        theme=theme,
        page_numbers=page_numbers,
        watermark=watermark,
        margin_box=margin_box,
    )

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_scene_svg(compose_page(config, page)), encoding="utf-8")
    typer.echo(f"Output: {output}")


@app.command()
def settings(
    template: str | None = TEMPLATE_OPTION,
    config_file: Path | None = CONFIG_OPTION,
    theme: str | None = THEME_OPTION,
    output_dir: Path | None = typer.Option(None, file_okay=False),
) -> None:
    """Write the configuration as a JSON settings document."""

    runtime = PaperCraftSettings()
    config = _resolve_config(template, config_file, SavedTemplateStore(runtime.store_path))
    if theme is not None:
        config = _apply_overrides(config, theme=theme)

    path = export_settings(config, output_dir or runtime.output_dir)
    typer.echo(f"Output: {path}")


@app.command()
def save(
    name: str = typer.Argument(..., help="Display name for the saved template."),
    template: str | None = TEMPLATE_OPTION,
    config_file: Path | None = CONFIG_OPTION,
    theme: str | None = THEME_OPTION,
) -> None:
    """Save a configuration to the local template store."""

    store = SavedTemplateStore(PaperCraftSettings().store_path)
    config = _resolve_config(template, config_file, store)
    if theme is not None:
        config = _apply_overrides(config, theme=theme)

    try:
        saved = store.save_as(config, name)
    except ValueError as exc:
        raise _fail(str(exc), 2) from exc
    except TemplateStoreError as exc:
        raise _fail(f"Save failed: {exc}", 1) from exc

    typer.echo(f"Saved {saved.name} as {saved.id}")


@app.command()
def saved() -> None:
    """List saved templates."""

    store = SavedTemplateStore(PaperCraftSettings().store_path)
    try:
        entries = store.list()
    except TemplateStoreError as exc:
        raise _fail(str(exc), 1) from exc

    if not entries:
        typer.echo("No saved templates.")
    for entry in entries:
        typer.echo(f"{entry.id:<24} {entry.name:<26} {entry.pattern.value}")


@app.command()
def delete(template_id: str = typer.Argument(...)) -> None:
    """Remove a saved template by id."""

    store = SavedTemplateStore(PaperCraftSettings().store_path)
    try:
        removed = store.remove(template_id)
    except TemplateStoreError as exc:
        raise _fail(f"Delete failed: {exc}", 1) from exc

    if not removed:
        raise _fail(f"No saved template with id {template_id}", 2)
    typer.echo(f"Deleted {template_id}")
