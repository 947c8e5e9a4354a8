"""
Theme Palettes - Data Models
============================
Seed colors, HCT conversion and the tonal palette data model.
"""

from theme_palettes.models.color import (
    Color, ColorError, ConversionFailure, MissingToneSample, HctPalette,
    parse_seed, seed_text, hex_to_hct, hct_to_hex, interpolate_hex
)
from theme_palettes.models.palette import (
    STANDARD_TONES, NEUTRAL_EXTRA_TONES, NEUTRAL_TONES, SEED_TONE,
    PaletteType, PaletteMode, DERIVED_TYPES, tones_for,
    MissingPaletteSlot, TonalPalette, ReferenceScheme, SeedColors, PaletteSet
)

__all__ = [
    'Color', 'ColorError', 'ConversionFailure', 'MissingToneSample', 'HctPalette',
    'parse_seed', 'seed_text', 'hex_to_hct', 'hct_to_hex', 'interpolate_hex',
    'STANDARD_TONES', 'NEUTRAL_EXTRA_TONES', 'NEUTRAL_TONES', 'SEED_TONE',
    'PaletteType', 'PaletteMode', 'DERIVED_TYPES', 'tones_for',
    'MissingPaletteSlot', 'TonalPalette', 'ReferenceScheme', 'SeedColors', 'PaletteSet'
]
