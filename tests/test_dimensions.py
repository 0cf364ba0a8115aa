import pytest

from papercraft.config import Orientation, PaperConfig, PaperDimension, PaperSize
from papercraft.dimensions import PAPER_DIMENSIONS, page_dimensions, resolve_dimensions


@pytest.mark.parametrize("size", list(PAPER_DIMENSIONS))
def test_landscape_swaps_portrait_dimensions(size: PaperSize) -> None:
    portrait = resolve_dimensions(size, None, Orientation.PORTRAIT)
    landscape = resolve_dimensions(size, None, Orientation.LANDSCAPE)

    assert (landscape.width, landscape.height) == (portrait.height, portrait.width)


def test_named_sizes_match_physical_table() -> None:
    assert resolve_dimensions(PaperSize.A4) == PaperDimension(width=210, height=297)
    assert resolve_dimensions("Letter") == PaperDimension(width=215.9, height=279.4)
    assert resolve_dimensions(PaperSize.EXECUTIVE) == PaperDimension(width=184.1, height=266.7)


def test_custom_size_uses_custom_dimensions_exactly() -> None:
    custom = PaperDimension(width=123.4, height=56.7)

    assert resolve_dimensions(PaperSize.CUSTOM, custom) == custom
    landscape = resolve_dimensions(PaperSize.CUSTOM, custom, Orientation.LANDSCAPE)
    assert (landscape.width, landscape.height) == (56.7, 123.4)


def test_custom_size_without_dimensions_falls_back_to_a4() -> None:
    assert resolve_dimensions(PaperSize.CUSTOM, None) == PAPER_DIMENSIONS[PaperSize.A4]


def test_unknown_size_falls_back_to_a4() -> None:
    resolved = resolve_dimensions("Postcard", None, "landscape")
    assert (resolved.width, resolved.height) == (297, 210)


def test_page_dimensions_reads_config() -> None:
    config = PaperConfig(size=PaperSize.A3, orientation=Orientation.LANDSCAPE)
    assert page_dimensions(config) == PaperDimension(width=420, height=297)
