"""Headless-browser canvas used to rasterize and print page scenes."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from enum import Enum
from typing import TYPE_CHECKING, Iterator

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from papercraft.models import PageScene, format_length
from papercraft.renderer import render_canvas_html, render_print_html

if TYPE_CHECKING:
    from playwright.sync_api import Page

logger = logging.getLogger(__name__)

JPEG_QUALITY = 95


class ImageFormat(str, Enum):
    PNG = "png"
    JPEG = "jpeg"


class CanvasError(RuntimeError):
    """Raised when the browser cannot rasterize or print a scene."""


class BrowserCanvas:
    """One reusable browser page; every draw fully repaints it on white."""

    def __init__(self, page: "Page") -> None:
        self._page = page

    def rasterize(
        self,
        scene: PageScene,
        width_px: int,
        height_px: int,
        image_format: ImageFormat = ImageFormat.PNG,
    ) -> bytes:
        try:
            self._page.set_viewport_size({"width": width_px, "height": height_px})
            self._page.set_content(render_canvas_html(scene, width_px, height_px), wait_until="load")
            if image_format == ImageFormat.JPEG:
                image = self._page.screenshot(type="jpeg", quality=JPEG_QUALITY)
            else:
                image = self._page.screenshot(type="png")
        except PlaywrightError as exc:
            raise CanvasError(f"Failed to rasterize page {scene.page_index}: {exc}") from exc

        logger.debug("Rasterized page %d at %dx%d px", scene.page_index, width_px, height_px)
        return image

    def print_pdf(self, scenes: list[PageScene]) -> bytes:
        """Print scenes as vector pages through the browser print pipeline."""

        first = scenes[0]
        try:
            self._page.set_content(render_print_html(scenes), wait_until="load")
            return self._page.pdf(
                width=f"{format_length(first.width)}mm",
                height=f"{format_length(first.height)}mm",
                print_background=True,
                prefer_css_page_size=True,
                margin={"top": "0", "right": "0", "bottom": "0", "left": "0"},
            )
        except PlaywrightError as exc:
            raise CanvasError(f"Failed to print {len(scenes)} page(s): {exc}") from exc


@contextmanager
def open_canvas(*, headless: bool = True) -> Iterator[BrowserCanvas]:
    """Launch Chromium and yield a canvas backed by a single page."""

    with sync_playwright() as playwright:
        try:
            browser = playwright.chromium.launch(headless=headless)
        except PlaywrightError as exc:
            raise CanvasError(
                f"Chromium could not be launched. Run `playwright install chromium`. ({exc})"
            ) from exc

        context = browser.new_context()
        try:
            yield BrowserCanvas(context.new_page())
        finally:
            context.close()
            browser.close()
