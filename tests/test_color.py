"""
Tests for seed color parsing and HCT conversion.
"""

import unittest

from theme_palettes.models.color import (
    Color, ConversionFailure, MissingToneSample, HctPalette,
    parse_seed, seed_text, hex_to_hct, hct_to_hex, interpolate_hex
)


def hue_distance(a, b):
    """Angular distance between two hues in degrees."""
    delta = abs(a - b) % 360.0
    return min(delta, 360.0 - delta)


class TestParseSeed(unittest.TestCase):
    """Tests for parse_seed and seed_text."""

    def test_normalizes_hex_strings(self):
        """Long, short, unprefixed and padded forms normalize to #rrggbb."""
        self.assertEqual(parse_seed("#343DFF"), "#343dff")
        self.assertEqual(parse_seed("343dff"), "#343dff")
        self.assertEqual(parse_seed("#0a0"), "#00aa00")
        self.assertEqual(parse_seed("bad"), "#bbaadd")
        self.assertEqual(parse_seed("  #B3261E "), "#b3261e")

    def test_accepts_rgb_integers(self):
        """24-bit integers render as hex."""
        self.assertEqual(parse_seed(0x343DFF), "#343dff")
        self.assertEqual(parse_seed(0), "#000000")

    def test_rejects_malformed_values(self):
        """Anything that is not a hex color raises ConversionFailure."""
        for value in ("", "#12345", "not-a-color", "#ggggggg", "rgb(1, 2, 3)", 0x1000000, -1, True, None, 1.5):
            with self.subTest(value=value):
                with self.assertRaises(ConversionFailure):
                    parse_seed(value)

    def test_seed_text(self):
        """Strings pass through verbatim; integers become hex when valid."""
        self.assertEqual(seed_text("#343DFF"), "#343DFF")
        self.assertEqual(seed_text("garbage"), "garbage")
        self.assertEqual(seed_text(0x00AA00), "#00aa00")
        self.assertEqual(seed_text(-5), "-5")


class TestHctConversion(unittest.TestCase):
    """Tests for conversion between hex and HCT."""

    def test_black_and_white_tones(self):
        """Black sits at tone 0 and white at tone 100."""
        self.assertAlmostEqual(hex_to_hct("#000000")[2], 0.0, delta=0.5)
        self.assertAlmostEqual(hex_to_hct("#ffffff")[2], 100.0, delta=0.5)

    def test_hue_is_normalized(self):
        """Hue is reported in [0, 360) and chroma is never negative."""
        for value in ("#343dff", "#b3261e", "#00aa00", "#808080", "#000000"):
            with self.subTest(value=value):
                hue, chroma, _ = hex_to_hct(value)
                self.assertGreaterEqual(hue, 0.0)
                self.assertLess(hue, 360.0)
                self.assertGreaterEqual(chroma, 0.0)

    def test_malformed_seed_fails_conversion(self):
        """Malformed seeds raise ConversionFailure."""
        with self.assertRaises(ConversionFailure):
            hex_to_hct("#zzzzzz")

    def test_round_trip_keeps_tone(self):
        """Converting HCT to hex lands on the requested tone."""
        hue, _, _ = hex_to_hct("#343dff")
        for tone in (10, 25, 50, 80, 95):
            with self.subTest(tone=tone):
                result = hct_to_hex(hue, 16.0, tone)
                self.assertRegex(result, r"^#[0-9a-f]{6}$")
                self.assertAlmostEqual(hex_to_hct(result)[2], tone, delta=1.0)

    def test_out_of_gamut_chroma_is_reduced(self):
        """A chroma no sRGB color reaches still yields a color at the requested tone."""
        result = hct_to_hex(120.0, 200.0, 50)
        hue, chroma, tone = hex_to_hct(result)
        self.assertAlmostEqual(tone, 50.0, delta=1.0)
        self.assertLess(chroma, 200.0)
        self.assertLess(hue_distance(hue, 120.0), 5.0)

    def test_gamut_fit_uses_hct_chroma_method(self):
        """Out of gamut colors are fitted by the registered HCT chroma reduction."""
        fitted = Color("hct", [120.0, 200.0, 50.0]).fit("srgb", method="hct-chroma")
        self.assertEqual(hct_to_hex(120.0, 200.0, 50), fitted.convert("srgb").to_string(hex=True).lower())

    def test_in_gamut_color_is_unchanged(self):
        """A color sRGB already reaches keeps its chroma."""
        result = hct_to_hex(270.0, 30.0, 40)
        hue, chroma, tone = hex_to_hct(result)
        self.assertAlmostEqual(tone, 40.0, delta=1.0)
        self.assertAlmostEqual(chroma, 30.0, delta=1.5)
        self.assertLess(hue_distance(hue, 270.0), 3.0)

    def test_interpolation_is_linear_in_tone(self):
        """Interpolating between two tones of one hue lands between them."""
        hue, _, _ = hex_to_hct("#343dff")
        start = hct_to_hex(hue, 4.0, 20)
        end = hct_to_hex(hue, 4.0, 30)
        middle = interpolate_hex(start, end, 0.2)
        self.assertAlmostEqual(hex_to_hct(middle)[2], 22.0, delta=1.0)

    def test_interpolation_from_black(self):
        """Black has no hue of its own, so the result follows the other color."""
        hue, _, _ = hex_to_hct("#343dff")
        end = hct_to_hex(hue, 4.0, 10)
        middle = interpolate_hex("#000000", end, 0.5)
        self.assertAlmostEqual(hex_to_hct(middle)[2], 5.0, delta=1.5)

    def test_interpolation_rejects_malformed_endpoint(self):
        """A malformed endpoint raises ConversionFailure."""
        with self.assertRaises(ConversionFailure):
            interpolate_hex("#000000", "nothex", 0.5)


class TestHctPalette(unittest.TestCase):
    """Tests for the HctPalette sampling capability."""

    def setUp(self):
        """Set up test fixtures."""
        hue, _, _ = hex_to_hct("#343dff")
        self.hue = hue
        self.palette = HctPalette(hue, 16.0)

    def test_extreme_tones(self):
        """Tone 0 is black and tone 100 is white."""
        self.assertEqual(self.palette.sample(0), "#000000")
        self.assertEqual(self.palette.sample(100), "#ffffff")

    def test_sample_keeps_hue_and_chroma(self):
        """Mid tones keep the palette's hue and chroma."""
        hue, chroma, tone = hex_to_hct(self.palette.sample(50))
        self.assertAlmostEqual(tone, 50.0, delta=1.0)
        self.assertAlmostEqual(chroma, 16.0, delta=1.5)
        self.assertLess(hue_distance(hue, self.hue), 3.0)

    def test_out_of_range_tone(self):
        """Tones outside [0, 100] cannot be sampled."""
        with self.assertRaises(MissingToneSample):
            self.palette.sample(101)
        with self.assertRaises(MissingToneSample):
            self.palette.sample(-1)

    def test_equality(self):
        """Palettes with the same hue and chroma compare equal."""
        self.assertEqual(self.palette, HctPalette(self.hue, 16.0))
        self.assertNotEqual(self.palette, HctPalette(self.hue, 24.0))


if __name__ == "__main__":
    unittest.main()
