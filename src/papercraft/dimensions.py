"""Physical paper dimensions in millimetres."""

from __future__ import annotations

import logging

from papercraft.config import Orientation, PaperConfig, PaperDimension, PaperSize

logger = logging.getLogger(__name__)

PAPER_DIMENSIONS: dict[PaperSize, PaperDimension] = {
    PaperSize.A3: PaperDimension(width=297, height=420),
    PaperSize.A4: PaperDimension(width=210, height=297),
    PaperSize.A5: PaperDimension(width=148, height=210),
    PaperSize.B4: PaperDimension(width=250, height=353),
    PaperSize.B5: PaperDimension(width=176, height=250),
    PaperSize.LETTER: PaperDimension(width=215.9, height=279.4),
    PaperSize.LEGAL: PaperDimension(width=215.9, height=355.6),
    PaperSize.TABLOID: PaperDimension(width=279.4, height=431.8),
    PaperSize.EXECUTIVE: PaperDimension(width=184.1, height=266.7),
}


def resolve_dimensions(
    size: PaperSize | str,
    custom_dimensions: PaperDimension | None = None,
    orientation: Orientation | str = Orientation.PORTRAIT,
) -> PaperDimension:
    """Return the page width/height in mm; never fails, falls back to A4."""

    base: PaperDimension | None
    if size == PaperSize.CUSTOM:
        base = custom_dimensions
    else:
        try:
            base = PAPER_DIMENSIONS.get(PaperSize(size))
        except ValueError:
            base = None

    if base is None:
        logger.warning("No dimensions for paper size %r, using A4", size)
        base = PAPER_DIMENSIONS[PaperSize.A4]

    if orientation == Orientation.LANDSCAPE:
        return PaperDimension(width=base.height, height=base.width)
    return base


def page_dimensions(config: PaperConfig) -> PaperDimension:
    return resolve_dimensions(config.size, config.custom_dimensions, config.orientation)
