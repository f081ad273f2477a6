"""Tests for EMU conversion helpers."""
import unittest

from docx_drawing.model.drawing import Extent
from docx_drawing.utils.units import (
    A4_EMU_MAX_WIDTH,
    EMU_PER_INCH,
    emu_to_inches,
    emu_to_points,
    fit_extent,
    inches_to_emu,
)


class UnitsTest(unittest.TestCase):
    """Validate conversions and width fitting."""

    def test_conversions(self) -> None:
        self.assertEqual(emu_to_inches(EMU_PER_INCH), 1.0)
        self.assertEqual(emu_to_points(EMU_PER_INCH), 72.0)
        self.assertEqual(inches_to_emu(0.5), 457200)

    def test_narrow_extent_is_unchanged(self) -> None:
        extent = Extent(cx=914400, cy=457200)
        self.assertIs(fit_extent(extent), extent)

    def test_wide_extent_scales_to_a4_width(self) -> None:
        fitted = fit_extent(Extent(cx=A4_EMU_MAX_WIDTH * 2, cy=1000000))
        self.assertEqual(fitted, Extent(cx=A4_EMU_MAX_WIDTH, cy=500000))

    def test_custom_max_width(self) -> None:
        self.assertEqual(fit_extent(Extent(cx=400, cy=300), max_width=200), Extent(cx=200, cy=150))

    def test_invalid_max_width(self) -> None:
        with self.assertRaises(ValueError):
            fit_extent(Extent(cx=1, cy=1), max_width=0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
