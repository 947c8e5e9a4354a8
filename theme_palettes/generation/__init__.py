"""
Theme Palettes - Generation Package
===================================
Tonal palette generation and theme palette composition.
"""

from theme_palettes.generation.tonal_palette_generator import TonalPaletteGenerator
from theme_palettes.generation.theme_palette_composer import ThemePaletteComposer

__all__ = [
    'TonalPaletteGenerator',
    'ThemePaletteComposer'
]
