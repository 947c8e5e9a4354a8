"""
Theme Palette Composer Module
=============================
Builds the full set of six palettes for a theme.

In seed mode the primary seed drives everything it is not overridden on:
secondary, tertiary, neutral and neutral-variant palettes come from a single
reference scheme of the primary seed unless their own seed is given. The
error palette is always built from its own seed. In full mode supplied
palettes pass through untouched and only the seed colors are read back.
"""

from typing import Any, Dict, Mapping, Optional, Union

from theme_palettes.generation.tonal_palette_generator import TonalPaletteGenerator
from theme_palettes.models.color import SeedValue, seed_text
from theme_palettes.models.palette import (
    DERIVED_TYPES, MissingPaletteSlot, PaletteMode, PaletteSet, PaletteType,
    ReferenceScheme, SeedColors, TonalPalette
)
from theme_palettes.utils.logger import get_logger, log_function_call

logger = get_logger(__name__)

SeedsValue = Union[SeedColors, Mapping[str, Any], str, int]


class ThemePaletteComposer:
    """Composes PaletteSets from seed colors or supplied palettes."""

    def __init__(
        self,
        generator: Optional[TonalPaletteGenerator] = None,
        config: Optional[Mapping[str, Any]] = None
    ):
        """
        Initialize the composer.

        Args:
            generator: Generator to use; one is created from ``config`` when omitted
            config: Overrides for DEFAULT_CONFIG, ignored when a generator is given
        """
        self.generator = generator or TonalPaletteGenerator(config)
        self.config = self.generator.config

    def coerce_seeds(self, seeds: SeedsValue) -> SeedColors:
        """
        Accept SeedColors, a seed mapping, or a bare primary seed.
        """
        if isinstance(seeds, SeedColors):
            return seeds
        if isinstance(seeds, Mapping):
            return SeedColors.from_dict(seeds, self.config)
        return SeedColors(seeds, default_primary=self.config['default_primary_seed'])

    def resolve_error_seed(self, seeds: SeedColors) -> SeedValue:
        """Explicit error seed, or the configured default."""
        return seeds.error if seeds.error is not None else self.config['default_error_seed']

    @log_function_call()
    def compose(self, seeds: SeedsValue) -> PaletteSet:
        """
        Generate all six palettes from seed colors.

        Args:
            seeds: Seed colors; only the primary seed is required

        Returns:
            PaletteSet in seed mode
        """
        seeds = self.coerce_seeds(seeds)
        generator = self.generator

        primary = generator.generate(seeds.primary, PaletteType.PRIMARY)

        scheme: Optional[ReferenceScheme] = None
        palettes: Dict[PaletteType, TonalPalette] = {}
        resolved: Dict[PaletteType, str] = {}
        for palette_type in DERIVED_TYPES:
            explicit = seeds.for_type(palette_type)
            if explicit is not None:
                palettes[palette_type] = generator.generate(explicit, palette_type)
                resolved[palette_type] = seed_text(explicit)
                continue

            if scheme is None:
                scheme = generator.reference_scheme(seeds.primary)
            palettes[palette_type], resolved[palette_type] = self._from_scheme(
                scheme, palette_type, seeds.primary
            )

        error_seed = self.resolve_error_seed(seeds)
        error = generator.generate(error_seed, PaletteType.ERROR)

        return PaletteSet(
            primary=primary,
            secondary=palettes[PaletteType.SECONDARY],
            tertiary=palettes[PaletteType.TERTIARY],
            neutral=palettes[PaletteType.NEUTRAL],
            neutral_variant=palettes[PaletteType.NEUTRAL_VARIANT],
            error=error,
            primary_seed=seed_text(seeds.primary),
            secondary_seed=resolved[PaletteType.SECONDARY],
            tertiary_seed=resolved[PaletteType.TERTIARY],
            neutral_seed=resolved[PaletteType.NEUTRAL],
            neutral_variant_seed=resolved[PaletteType.NEUTRAL_VARIANT],
            error_seed=seed_text(error_seed),
            mode=PaletteMode.SEED,
        )

    @log_function_call()
    def compose_full(
        self,
        palettes: Optional[Mapping[Any, Any]],
        seeds: Optional[SeedsValue] = None
    ) -> PaletteSet:
        """
        Pass supplied palettes through and read their seed colors back.

        Each seed is the explicit one when given, else tone 50 of its own
        palette, else the primary seed (the default error seed for the error
        palette). Missing palettes become empty.

        Args:
            palettes: Mapping keyed by palette type (enum, ``"neutralVariant"``,
                ``"neutral_variant"`` or ``"neutralVariantPalette"``)
            seeds: Explicit seed colors, if any

        Returns:
            PaletteSet in full mode
        """
        seeds = self.coerce_seeds(seeds if seeds is not None else {})
        supplied = {
            palette_type: TonalPalette.from_mapping(palette_type, _lookup_palette(palettes, palette_type))
            for palette_type in PaletteType
        }

        primary_seed = seed_text(seeds.primary)
        resolved: Dict[PaletteType, str] = {}
        for palette_type in DERIVED_TYPES:
            explicit = seeds.for_type(palette_type)
            if explicit is not None:
                resolved[palette_type] = seed_text(explicit)
            else:
                resolved[palette_type] = supplied[palette_type].seed_color or primary_seed

        if seeds.error is not None:
            error_seed = seed_text(seeds.error)
        else:
            error_seed = supplied[PaletteType.ERROR].seed_color or self.config['default_error_seed']

        return PaletteSet(
            primary=supplied[PaletteType.PRIMARY],
            secondary=supplied[PaletteType.SECONDARY],
            tertiary=supplied[PaletteType.TERTIARY],
            neutral=supplied[PaletteType.NEUTRAL],
            neutral_variant=supplied[PaletteType.NEUTRAL_VARIANT],
            error=supplied[PaletteType.ERROR],
            primary_seed=primary_seed,
            secondary_seed=resolved[PaletteType.SECONDARY],
            tertiary_seed=resolved[PaletteType.TERTIARY],
            neutral_seed=resolved[PaletteType.NEUTRAL],
            neutral_variant_seed=resolved[PaletteType.NEUTRAL_VARIANT],
            error_seed=error_seed,
            mode=PaletteMode.FULL,
        )

    def compose_mode(
        self,
        mode: Union[PaletteMode, str],
        seeds: Optional[SeedsValue] = None,
        palettes: Optional[Mapping[Any, Any]] = None
    ) -> PaletteSet:
        """
        Compose according to a theme's palette mode.

        Args:
            mode: ``seed`` to generate from seeds, ``full`` to pass palettes through
            seeds: Seed colors
            palettes: Supplied palettes, used in full mode

        Returns:
            PaletteSet
        """
        mode = PaletteMode(mode)
        if mode is PaletteMode.FULL:
            return self.compose_full(palettes, seeds)
        return self.compose(seeds if seeds is not None else {})

    def all_tones(self, palette_set: PaletteSet) -> Dict[PaletteType, TonalPalette]:
        """
        Complete every palette of a set to its declared tones for display.

        Missing tones are generated from the palette's resolved seed with the
        generation fallback rules.
        """
        return {
            palette_type: self.generator.fill_missing(
                palette_set.palette(palette_type), palette_set.seed(palette_type), palette_type
            )
            for palette_type in PaletteType
        }

    def _from_scheme(self, scheme: ReferenceScheme, palette_type: PaletteType, primary_seed: SeedValue):
        try:
            return scheme.palette(palette_type), scheme.seed_color(palette_type)
        except MissingPaletteSlot as e:
            logger.error(f"Using primary seed for {palette_type.value} palette: {e}")
            return self.generator.fallback_palette(primary_seed, palette_type), seed_text(primary_seed)


def _lookup_palette(palettes: Optional[Mapping[Any, Any]], palette_type: PaletteType):
    if not palettes:
        return None
    for key in (palette_type, palette_type.value, palette_type.attribute, f"{palette_type.value}Palette"):
        if key in palettes:
            return palettes[key]
    return None
