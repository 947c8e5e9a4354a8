"""
Tonal Palette Generator Module
==============================
Builds the tonal palette of one palette type from one seed color.

Each palette type applies its own hue/chroma rule to the seed's HCT
coordinates (the Material core palette rules), then the resulting
hue/chroma pair is sampled at every declared tone. Conversion problems never
escape: a seed that cannot be converted yields a palette filled with the seed
itself, and a tone that cannot be sampled falls back on its own.
"""

from typing import Any, Dict, Mapping, Optional, Union

from theme_palettes.config import merge_config
from theme_palettes.models.color import (
    ColorError, ConversionFailure, MissingToneSample, HctCoords, HctPalette,
    SeedValue, hex_to_hct, interpolate_hex, parse_seed, seed_text
)
from theme_palettes.models.palette import (
    DERIVED_TYPES, NEUTRAL_EXTRA_TONES, STANDARD_TONES,
    PaletteType, ReferenceScheme, TonalPalette, tones_for
)
from theme_palettes.utils.logger import get_logger

logger = get_logger(__name__)

PaletteTypeValue = Union[PaletteType, str]


class TonalPaletteGenerator:
    """
    Generates tonal palettes from seed colors.

    Stateless apart from its configuration; instances can be shared freely.
    """

    def __init__(self, config: Optional[Mapping[str, Any]] = None):
        """
        Initialize the generator.

        Args:
            config: Overrides for DEFAULT_CONFIG
        """
        self.config = merge_config(config)

    def generate(self, seed: SeedValue, palette_type: PaletteTypeValue = PaletteType.PRIMARY) -> TonalPalette:
        """
        Generate the tonal palette of one palette type from a seed color.

        Args:
            seed: Seed color as hex string or 24-bit RGB integer
            palette_type: Palette type to derive

        Returns:
            TonalPalette holding every tone declared for the palette type
        """
        palette_type = PaletteType.parse(palette_type)
        try:
            seed_hex, hct = self._convert(seed)
        except ConversionFailure as e:
            logger.warning(f"Error generating {palette_type.value} palette: {e}")
            return self.fallback_palette(seed, palette_type)

        return self._fill(self.core_palette(hct, palette_type), seed_hex, palette_type, {})

    def core_palette(self, hct: HctCoords, palette_type: PaletteTypeValue) -> HctPalette:
        """
        Apply a palette type's hue/chroma rule to a seed's HCT coordinates.

        The error palette is built as the primary palette of its own seed.

        Args:
            hct: Seed as (hue, chroma, tone)
            palette_type: Palette type to derive

        Returns:
            HctPalette for sampling
        """
        palette_type = PaletteType.parse(palette_type)
        hue, chroma, _ = hct
        config = self.config

        if palette_type in (PaletteType.PRIMARY, PaletteType.ERROR):
            return HctPalette(hue, max(chroma, config['primary_min_chroma']))
        if palette_type is PaletteType.SECONDARY:
            return HctPalette(hue, config['secondary_chroma'])
        if palette_type is PaletteType.TERTIARY:
            return HctPalette(hue + config['tertiary_hue_rotation'], config['tertiary_chroma'])
        if palette_type is PaletteType.NEUTRAL:
            return HctPalette(hue, config['neutral_chroma'])
        return HctPalette(hue, config['neutral_variant_chroma'])

    def reference_scheme(self, primary_seed: SeedValue) -> ReferenceScheme:
        """
        Derive the secondary, tertiary, neutral and neutral-variant palettes
        from a single conversion of the primary seed.

        Args:
            primary_seed: Primary seed color

        Returns:
            ReferenceScheme with one palette per derived slot
        """
        seed = seed_text(primary_seed)
        try:
            seed_hex, hct = self._convert(primary_seed)
        except ConversionFailure as e:
            logger.warning(f"Error deriving reference scheme: {e}")
            return ReferenceScheme(seed, {
                palette_type: self.fallback_palette(primary_seed, palette_type)
                for palette_type in DERIVED_TYPES
            })

        return ReferenceScheme(seed, {
            palette_type: self._fill(self.core_palette(hct, palette_type), seed_hex, palette_type, {})
            for palette_type in DERIVED_TYPES
        })

    def fill_missing(
        self,
        palette: Optional[Mapping[Any, Any]],
        seed: SeedValue,
        palette_type: PaletteTypeValue
    ) -> TonalPalette:
        """
        Complete a palette to its declared tone set.

        Tones already present are kept; missing ones are generated from the
        seed with the same sampling and fallback rules as ``generate``. Tones
        outside the declared set are dropped. Used for the "all tones" display
        view and for partially supplied palettes.

        Args:
            palette: Existing tone to color mapping (may be partial or None)
            seed: Seed color to generate missing tones from
            palette_type: Palette type of the palette

        Returns:
            TonalPalette holding every declared tone
        """
        palette_type = PaletteType.parse(palette_type)
        existing = TonalPalette.from_mapping(palette_type, palette)
        colors = {tone: existing[tone] for tone in tones_for(palette_type) if existing.get(tone)}
        if len(colors) == len(tones_for(palette_type)):
            return TonalPalette(palette_type, colors)

        try:
            seed_hex, hct = self._convert(seed)
        except ConversionFailure as e:
            logger.warning(f"Error completing {palette_type.value} palette: {e}")
            return self.fallback_palette(seed, palette_type, colors)

        return self._fill(self.core_palette(hct, palette_type), seed_hex, palette_type, colors)

    def fallback_palette(
        self,
        seed: SeedValue,
        palette_type: PaletteTypeValue,
        colors: Optional[Mapping[int, str]] = None
    ) -> TonalPalette:
        """
        Build the degraded palette where every missing declared tone is the raw seed.

        Args:
            seed: Seed color, used verbatim
            palette_type: Palette type
            colors: Tones to keep as they are

        Returns:
            TonalPalette holding every declared tone
        """
        palette_type = PaletteType.parse(palette_type)
        raw = seed_text(seed)
        filled = dict(colors or {})
        for tone in tones_for(palette_type):
            filled.setdefault(tone, raw)
        return TonalPalette(palette_type, filled)

    def _convert(self, seed: SeedValue):
        seed_hex = parse_seed(seed)
        return seed_hex, hex_to_hct(seed_hex)

    def _fill(
        self,
        hct_palette: HctPalette,
        seed_hex: str,
        palette_type: PaletteType,
        colors: Dict[int, str]
    ) -> TonalPalette:
        # Standard tones first: intermediate neutral tones interpolate between them
        for tone in STANDARD_TONES:
            if not colors.get(tone):
                colors[tone] = self._sample_tone(hct_palette, tone, seed_hex, palette_type)

        if palette_type is PaletteType.NEUTRAL:
            for tone in NEUTRAL_EXTRA_TONES:
                if not colors.get(tone):
                    colors[tone] = self._sample_extra_tone(hct_palette, tone, seed_hex, colors)

        return TonalPalette(palette_type, colors)

    def _sample_tone(
        self,
        hct_palette: HctPalette,
        tone: int,
        seed_hex: str,
        palette_type: PaletteType
    ) -> str:
        try:
            return hct_palette.sample(tone)
        except MissingToneSample as e:
            logger.warning(f"Using seed color for tone {tone} of {palette_type.value} palette: {e}")
            return seed_hex

    def _sample_extra_tone(
        self,
        hct_palette: HctPalette,
        tone: int,
        seed_hex: str,
        colors: Mapping[int, str]
    ) -> str:
        try:
            return hct_palette.sample(tone)
        except MissingToneSample as e:
            logger.warning(f"Interpolating tone {tone} of neutral palette: {e}")

        lower, upper = (tone // 10) * 10, -(-tone // 10) * 10
        if colors.get(lower) and colors.get(upper):
            try:
                return interpolate_hex(colors[lower], colors[upper], (tone - lower) / (upper - lower))
            except ColorError as e:
                logger.warning(f"Interpolation failed for tone {tone} of neutral palette: {e}")
        return seed_hex
