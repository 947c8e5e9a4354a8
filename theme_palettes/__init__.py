"""
Theme Palettes Package
======================
Derives Material Design 3 style tonal palettes for a design-token theme
from one to six seed colors.
"""

__version__ = "0.1.0"

from theme_palettes.config import DEFAULT_CONFIG, merge_config
from theme_palettes.generation import TonalPaletteGenerator, ThemePaletteComposer
from theme_palettes.models import (
    ColorError, ConversionFailure, MissingToneSample, MissingPaletteSlot,
    PaletteType, PaletteMode, TonalPalette, SeedColors, PaletteSet,
    STANDARD_TONES, NEUTRAL_EXTRA_TONES
)


def generate_palette(seed, palette_type=PaletteType.PRIMARY, config=None):
    """Generate a single tonal palette with a default generator."""
    return TonalPaletteGenerator(config).generate(seed, palette_type)


def compose_palettes(seeds, config=None):
    """Generate all six palettes of a theme from its seed colors."""
    return ThemePaletteComposer(config=config).compose(seeds)


__all__ = [
    'DEFAULT_CONFIG',
    'merge_config',
    'TonalPaletteGenerator',
    'ThemePaletteComposer',
    'generate_palette',
    'compose_palettes',
    'ColorError',
    'ConversionFailure',
    'MissingToneSample',
    'MissingPaletteSlot',
    'PaletteType',
    'PaletteMode',
    'TonalPalette',
    'SeedColors',
    'PaletteSet',
    'STANDARD_TONES',
    'NEUTRAL_EXTRA_TONES',
]
