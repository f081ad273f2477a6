"""Unit conversion helpers for DrawingML measurements."""
from __future__ import annotations

from docx_drawing.model.drawing import Extent

EMU_PER_INCH = 914400
EMU_PER_POINT = 12700
POINTS_PER_INCH = 72

# Max display width of an A4 page body, in EMU.
A4_EMU_MAX_WIDTH = 5274310


def emu_to_points(value: int) -> float:
    """Convert English Metric Units to typographic points."""
    return value / EMU_PER_POINT


def emu_to_inches(value: int) -> float:
    """Convert English Metric Units to inches."""
    return value / EMU_PER_INCH


def inches_to_emu(value: float) -> int:
    return int(round(value * EMU_PER_INCH))


def fit_extent(extent: Extent, max_width: int = A4_EMU_MAX_WIDTH) -> Extent:
    """Scale an extent proportionally so its width does not exceed ``max_width``.

    Extents already narrow enough are returned unchanged.
    """
    if max_width <= 0:
        raise ValueError(f"max_width must be positive, got {max_width}")
    if extent.cx <= max_width:
        return extent
    height = int(round(extent.cy * max_width / extent.cx))
    return Extent(cx=max_width, cy=height)
