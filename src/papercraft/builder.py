"""Export and print orchestration for papercraft."""

from __future__ import annotations

import logging
import math
import re
from enum import Enum
from pathlib import Path
from typing import Protocol, Sequence

import fitz

from papercraft.canvas import ImageFormat
from papercraft.composer import compose_document
from papercraft.config import PaperConfig, PaperDimension
from papercraft.models import ExportReport, PageScene

logger = logging.getLogger(__name__)

EXPORT_DPI = 300
MM_PER_INCH = 25.4
PX_PER_MM = EXPORT_DPI / MM_PER_INCH
PT_PER_MM = 72 / MM_PER_INCH


class ExportFormat(str, Enum):
    PNG = "png"
    JPG = "jpg"
    PDF = "pdf"


class ExportError(RuntimeError):
    """Raised when there is nothing to export."""


class Canvas(Protocol):
    def rasterize(
        self,
        scene: PageScene,
        width_px: int,
        height_px: int,
        image_format: ImageFormat = ImageFormat.PNG,
    ) -> bytes: ...

    def print_pdf(self, scenes: list[PageScene]) -> bytes: ...


def canvas_size(dimensions: PaperDimension) -> tuple[int, int]:
    """Pixel size of the export canvas for a physical page at 300 DPI."""

    return math.ceil(dimensions.width * PX_PER_MM), math.ceil(dimensions.height * PX_PER_MM)


def _slug(name: str) -> str:
    return re.sub(r"\s+", "-", name.lower())


def export_filename(name: str, export_format: ExportFormat) -> str:
    if export_format == ExportFormat.PDF:
        return f"{_slug(name)}.pdf"
    # Raster exports only ever contain the first page.
    return f"{_slug(name)}-page1.{export_format.value}"


def _scene_dimensions(scenes: Sequence[PageScene], dimensions: PaperDimension | None) -> PaperDimension:
    if dimensions is not None:
        return dimensions
    return PaperDimension(width=scenes[0].width, height=scenes[0].height)


def _assemble_pdf(scenes: Sequence[PageScene], canvas: Canvas, dimensions: PaperDimension) -> bytes:
    width_px, height_px = canvas_size(dimensions)
    page_width = dimensions.width * PT_PER_MM
    page_height = dimensions.height * PT_PER_MM

    document = fitz.open()
    try:
        # Strictly one page at a time: the canvas is shared between pages.
        for scene in scenes:
            image = canvas.rasterize(scene, width_px, height_px, ImageFormat.PNG)
            page = document.new_page(width=page_width, height=page_height)
            page.insert_image(page.rect, stream=image)
        return document.tobytes()
    finally:
        document.close()


def export_scenes(
    scenes: Sequence[PageScene],
    export_format: ExportFormat,
    canvas: Canvas,
    output_dir: Path,
    name: str,
    *,
    dimensions: PaperDimension | None = None,
) -> ExportReport:
    """Write composed scenes to a PNG/JPEG (first page) or a multi-page PDF."""

    if not scenes:
        raise ExportError("Could not find paper to export")

    dimensions = _scene_dimensions(scenes, dimensions)
    output = output_dir / export_filename(name, export_format)

    if export_format == ExportFormat.PDF:
        payload = _assemble_pdf(scenes, canvas, dimensions)
        page_count = len(scenes)
    else:
        width_px, height_px = canvas_size(dimensions)
        image_format = ImageFormat.PNG if export_format == ExportFormat.PNG else ImageFormat.JPEG
        payload = canvas.rasterize(scenes[0], width_px, height_px, image_format)
        page_count = 1

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(payload)
    logger.info("Exported %d page(s) to %s", page_count, output)

    return ExportReport(format=export_format.value, pages=page_count, outputs=[output])


def export_config(
    config: PaperConfig,
    export_format: ExportFormat,
    canvas: Canvas,
    output_dir: Path,
) -> ExportReport:
    """Compose every page of ``config`` and export it."""

    return export_scenes(compose_document(config), export_format, canvas, output_dir, config.name)


def print_config(config: PaperConfig, canvas: Canvas, output: Path) -> ExportReport:
    """Send the vector scenes to the browser print pipeline and save the PDF."""

    scenes = compose_document(config)
    if not scenes:
        raise ExportError("Could not find paper to print")

    output = output if output.suffix.lower() == ".pdf" else output.with_suffix(".pdf")
    payload = canvas.print_pdf(scenes)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(payload)
    logger.info("Printed %d page(s) to %s", len(scenes), output)

    return ExportReport(format=ExportFormat.PDF.value, pages=len(scenes), outputs=[output])
