"""
Tests for the palette data model.
"""

import unittest

from theme_palettes.models.palette import (
    NEUTRAL_EXTRA_TONES, NEUTRAL_TONES, STANDARD_TONES,
    MissingPaletteSlot, PaletteType, ReferenceScheme, SeedColors, TonalPalette
)


class TestToneTables(unittest.TestCase):
    """Tests for the declared tone sets."""

    def test_standard_tones(self):
        """Sixteen sorted standard tones from black to white."""
        self.assertEqual(len(STANDARD_TONES), 16)
        self.assertEqual(list(STANDARD_TONES), sorted(STANDARD_TONES))
        self.assertEqual((STANDARD_TONES[0], STANDARD_TONES[-1]), (0, 100))

    def test_neutral_tones(self):
        """Neutral tones add ten extras without overlap."""
        self.assertEqual(len(NEUTRAL_TONES), 26)
        self.assertFalse(set(NEUTRAL_EXTRA_TONES) & set(STANDARD_TONES))
        self.assertEqual(PaletteType.NEUTRAL.tones, NEUTRAL_TONES)
        self.assertEqual(PaletteType.NEUTRAL_VARIANT.tones, STANDARD_TONES)


class TestPaletteType(unittest.TestCase):
    """Tests for PaletteType parsing."""

    def test_parse(self):
        """Members, values and attribute names all resolve."""
        self.assertIs(PaletteType.parse(PaletteType.ERROR), PaletteType.ERROR)
        self.assertIs(PaletteType.parse("neutralVariant"), PaletteType.NEUTRAL_VARIANT)
        self.assertIs(PaletteType.parse("neutral_variant"), PaletteType.NEUTRAL_VARIANT)
        with self.assertRaises(ValueError):
            PaletteType.parse("accent")


class TestTonalPalette(unittest.TestCase):
    """Tests for TonalPalette."""

    def test_from_mapping(self):
        """String keys become tones; bad keys and empty values are dropped."""
        palette = TonalPalette.from_mapping("secondary", {
            "50": "#767a99", 40: "#5e6280", "x": "#000000", "120": "#ffffff", "60": "",
        })
        self.assertEqual(palette, {40: "#5e6280", 50: "#767a99"})
        self.assertEqual(list(palette), [40, 50])
        self.assertEqual(palette.seed_color, "#767a99")
        self.assertFalse(palette.is_complete)
        self.assertNotIn(50, palette.missing_tones)
        self.assertIn(60, palette.missing_tones)

    def test_from_mapping_rejects_non_integer_keys(self):
        """Float and boolean keys are dropped instead of truncated to a tone."""
        palette = TonalPalette.from_mapping("primary", {
            50.7: "#5a64ff", True: "#111111", " 40 ": "#4a54ef", "30.0": "#333333", 20: "#222222",
        })
        self.assertEqual(palette, {20: "#222222", 40: "#4a54ef"})
        self.assertIsNone(palette.seed_color)

    def test_palettes_are_hashable(self):
        """Equal palettes hash alike."""
        first = TonalPalette(PaletteType.PRIMARY, {50: "#5a64ff", 0: "#000000"})
        second = TonalPalette.from_mapping(PaletteType.PRIMARY, {"0": "#000000", "50": "#5a64ff"})
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))
        self.assertEqual(len({first, second}), 1)

    def test_empty_palette(self):
        """None gives an empty palette with no seed color."""
        palette = TonalPalette.from_mapping(PaletteType.NEUTRAL, None)
        self.assertEqual(len(palette), 0)
        self.assertIsNone(palette.seed_color)
        self.assertEqual(palette.missing_tones, NEUTRAL_TONES)


class TestReferenceScheme(unittest.TestCase):
    """Tests for ReferenceScheme lookups."""

    def test_missing_slot(self):
        """Absent slots raise MissingPaletteSlot."""
        scheme = ReferenceScheme("#343dff", {
            PaletteType.SECONDARY: TonalPalette(PaletteType.SECONDARY, {50: "#767a99"}),
            PaletteType.TERTIARY: TonalPalette(PaletteType.TERTIARY, {40: "#7e5260"}),
        })
        self.assertIn(PaletteType.SECONDARY, scheme)
        self.assertEqual(scheme.seed_color(PaletteType.SECONDARY), "#767a99")
        self.assertEqual(scheme.seed_color(PaletteType.TERTIARY), "#343dff")
        with self.assertRaises(MissingPaletteSlot):
            scheme.palette(PaletteType.NEUTRAL)


class TestSeedColors(unittest.TestCase):
    """Tests for SeedColors."""

    def test_blank_seeds_are_unset(self):
        """Blank strings count as unset; the primary falls back to the default."""
        seeds = SeedColors("", secondary="  ", error="")
        self.assertEqual(seeds.primary, "#343dff")
        self.assertIsNone(seeds.secondary)
        self.assertIsNone(seeds.error)

    def test_from_dict_form_keys(self):
        """Theme form keys and attribute names are both accepted."""
        seeds = SeedColors.from_dict({
            "primarySeed": "#343DFF",
            "neutral_variant": "#667788",
            "errorSeedColor": "",
        })
        self.assertEqual(seeds.primary, "#343DFF")
        self.assertEqual(seeds.neutral_variant, "#667788")
        self.assertIsNone(seeds.error)
        self.assertEqual(seeds.for_type(PaletteType.NEUTRAL_VARIANT), "#667788")

    def test_configured_default_primary(self):
        """The default primary seed follows the configuration."""
        seeds = SeedColors.from_dict({}, {"default_primary_seed": "#00aa00"})
        self.assertEqual(seeds.primary, "#00aa00")

    def test_integer_seed(self):
        """Integer seeds are kept as given."""
        self.assertEqual(SeedColors(0x343DFF).primary, 0x343DFF)


if __name__ == "__main__":
    unittest.main()
