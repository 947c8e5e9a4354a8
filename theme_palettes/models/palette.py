"""
Tonal palette data model.

A tonal palette maps tone stops (perceptual lightness, 0 = black,
100 = white) to hex colors. Five palette types share the standard tone set;
the neutral palette also carries intermediate tones used for surfaces.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

from theme_palettes.config import DEFAULT_CONFIG
from theme_palettes.utils.logger import get_logger

logger = get_logger(__name__)

# Tone tables
STANDARD_TONES: Tuple[int, ...] = (0, 10, 20, 25, 30, 35, 40, 50, 60, 70, 80, 90, 95, 98, 99, 100)
NEUTRAL_EXTRA_TONES: Tuple[int, ...] = (4, 6, 12, 17, 22, 24, 87, 92, 94, 96)
NEUTRAL_TONES: Tuple[int, ...] = tuple(sorted(STANDARD_TONES + NEUTRAL_EXTRA_TONES))

SEED_TONE = 50  # Tone a palette's seed color is read back from


class PaletteType(Enum):
    """The six palette slots of a theme."""
    PRIMARY = 'primary'
    SECONDARY = 'secondary'
    TERTIARY = 'tertiary'
    NEUTRAL = 'neutral'
    NEUTRAL_VARIANT = 'neutralVariant'
    ERROR = 'error'

    @property
    def tones(self) -> Tuple[int, ...]:
        """Declared tone set of this palette type."""
        return tones_for(self)

    @property
    def attribute(self) -> str:
        """Snake-case attribute name, e.g. ``neutral_variant``."""
        return self.name.lower()

    @classmethod
    def parse(cls, value: Union['PaletteType', str]) -> 'PaletteType':
        """
        Resolve a palette type from an enum member, its value or its attribute name.

        Raises:
            ValueError: If the value names no palette type
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if value in (member.value, member.attribute):
                return member
        raise ValueError(f"Unknown palette type: {value!r}")


# Slots that cascade from the primary seed when no seed of their own is given
DERIVED_TYPES: Tuple[PaletteType, ...] = (
    PaletteType.SECONDARY,
    PaletteType.TERTIARY,
    PaletteType.NEUTRAL,
    PaletteType.NEUTRAL_VARIANT,
)


class PaletteMode(Enum):
    """How a theme's palettes were produced."""
    SEED = 'seed'  # Generated from seed colors
    FULL = 'full'  # Supplied directly, e.g. imported or hand edited


def tones_for(palette_type: PaletteType) -> Tuple[int, ...]:
    """Return the sorted tone set declared for a palette type."""
    if palette_type is PaletteType.NEUTRAL:
        return NEUTRAL_TONES
    return STANDARD_TONES


class MissingPaletteSlot(KeyError):
    """A derived slot is absent from a reference scheme."""
    pass


def _parse_tone(key: Any) -> Optional[int]:
    # Integers or strings of digits only; floats and booleans are not tones
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.strip().isdecimal():
        return int(key.strip())
    return None


class TonalPalette(Mapping[int, str]):
    """
    Immutable mapping of tone stop to color for one palette type.

    Compares equal to any mapping with the same tone/color pairs and hashes
    on those pairs, so PaletteSets holding palettes stay hashable.
    """

    __slots__ = ('_palette_type', '_colors')

    def __init__(self, palette_type: PaletteType, colors: Mapping[int, str]):
        self._palette_type = palette_type
        self._colors = {tone: colors[tone] for tone in sorted(colors)}

    @classmethod
    def from_mapping(
        cls,
        palette_type: Union[PaletteType, str],
        mapping: Optional[Mapping[Any, Any]]
    ) -> 'TonalPalette':
        """
        Build a palette from loosely typed data such as an imported theme.

        Keys may be ints or strings of digits. Entries with empty values or keys
        that are not integer tones in [0, 100] are dropped.

        Args:
            palette_type: Palette type of the data
            mapping: Tone to color mapping, or None for an empty palette

        Returns:
            TonalPalette instance
        """
        palette_type = PaletteType.parse(palette_type)
        if isinstance(mapping, TonalPalette):
            return cls(palette_type, mapping._colors)

        colors: Dict[int, str] = {}
        for key, value in (mapping or {}).items():
            tone = _parse_tone(key)
            if tone is None:
                logger.warning(f"Ignoring non-integer tone {key!r} in {palette_type.value} palette")
                continue
            if not 0 <= tone <= 100:
                logger.warning(f"Ignoring out of range tone {tone} in {palette_type.value} palette")
                continue
            if value:
                colors[tone] = str(value)
        return cls(palette_type, colors)

    @property
    def palette_type(self) -> PaletteType:
        return self._palette_type

    @property
    def declared_tones(self) -> Tuple[int, ...]:
        return tones_for(self._palette_type)

    @property
    def missing_tones(self) -> Tuple[int, ...]:
        """Declared tones that have no color."""
        return tuple(tone for tone in self.declared_tones if not self._colors.get(tone))

    @property
    def is_complete(self) -> bool:
        return not self.missing_tones

    @property
    def seed_color(self) -> Optional[str]:
        """Color at the seed tone, if present."""
        return self._colors.get(SEED_TONE) or None

    def to_dict(self) -> Dict[int, str]:
        return dict(self._colors)

    def __getitem__(self, tone: int) -> str:
        return self._colors[tone]

    def __iter__(self) -> Iterator[int]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __hash__(self) -> int:
        return hash(tuple(self._colors.items()))

    def __repr__(self) -> str:
        return f"TonalPalette({self._palette_type.value}, {self._colors!r})"


class ReferenceScheme:
    """
    Palettes derived from a single conversion of the primary seed.

    Holds the secondary, tertiary, neutral and neutral-variant palettes used
    whenever a theme leaves one of those seeds unset.
    """

    __slots__ = ('_seed', '_palettes')

    def __init__(self, seed: str, palettes: Mapping[PaletteType, TonalPalette]):
        self._seed = seed
        self._palettes = dict(palettes)

    @property
    def seed(self) -> str:
        return self._seed

    def palette(self, palette_type: PaletteType) -> TonalPalette:
        """
        Get a derived palette.

        Raises:
            MissingPaletteSlot: If the scheme has no palette of that type
        """
        try:
            return self._palettes[palette_type]
        except KeyError:
            raise MissingPaletteSlot(
                f"Reference scheme for {self._seed} has no {palette_type.value} palette"
            ) from None

    def seed_color(self, palette_type: PaletteType) -> str:
        """Seed tone of a derived palette, or the primary seed when it is absent."""
        return self.palette(palette_type).seed_color or self._seed

    def __contains__(self, palette_type: object) -> bool:
        return palette_type in self._palettes


def _clean_seed(value: Any) -> Optional[Any]:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


# Form keys used by imported theme records, by attribute name
_SEED_ALIASES = {
    'primary': ('primary', 'primarySeed', 'primary_seed'),
    'secondary': ('secondary', 'secondarySeed', 'secondary_seed'),
    'tertiary': ('tertiary', 'tertiarySeed', 'tertiary_seed'),
    'neutral': ('neutral', 'neutralSeedColor', 'neutral_seed'),
    'neutral_variant': ('neutral_variant', 'neutralVariantSeedColor', 'neutral_variant_seed'),
    'error': ('error', 'errorSeedColor', 'error_seed'),
}


@dataclass(frozen=True)
class SeedColors:
    """
    Seed inputs of a theme.

    Blank strings are treated as unset. The primary seed is mandatory; an
    unset primary resolves to the configured default primary seed when the
    instance is built. Optional seeds stay None when unset.
    """
    primary: Optional[Union[str, int]] = None
    secondary: Optional[Union[str, int]] = None
    tertiary: Optional[Union[str, int]] = None
    neutral: Optional[Union[str, int]] = None
    neutral_variant: Optional[Union[str, int]] = None
    error: Optional[Union[str, int]] = None
    default_primary: str = DEFAULT_CONFIG['default_primary_seed']

    def __post_init__(self):
        for name in _SEED_ALIASES:
            object.__setattr__(self, name, _clean_seed(getattr(self, name)))
        if self.primary is None:
            object.__setattr__(self, 'primary', self.default_primary)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        config: Optional[Mapping[str, Any]] = None
    ) -> 'SeedColors':
        """
        Create seeds from a mapping using attribute names or theme form keys.

        Args:
            data: Mapping such as ``{"primarySeed": "#343dff", "errorSeedColor": ""}``
            config: Effective configuration; supplies the default primary seed

        Returns:
            SeedColors instance
        """
        config = config or DEFAULT_CONFIG
        values = {}
        for name, aliases in _SEED_ALIASES.items():
            for alias in aliases:
                if _clean_seed(data.get(alias)) is not None:
                    values[name] = data[alias]
                    break
        return cls(default_primary=config['default_primary_seed'], **values)

    def for_type(self, palette_type: PaletteType) -> Optional[Union[str, int]]:
        """Explicit seed of a palette slot, or None when unset."""
        return getattr(self, palette_type.attribute)


@dataclass(frozen=True)
class PaletteSet:
    """
    The six palettes of a theme together with the seeds they resolve to.

    Built fresh for every regeneration and never mutated.
    """
    primary: TonalPalette
    secondary: TonalPalette
    tertiary: TonalPalette
    neutral: TonalPalette
    neutral_variant: TonalPalette
    error: TonalPalette
    primary_seed: str
    secondary_seed: str
    tertiary_seed: str
    neutral_seed: str
    neutral_variant_seed: str
    error_seed: str
    mode: PaletteMode = PaletteMode.SEED

    def palette(self, palette_type: Union[PaletteType, str]) -> TonalPalette:
        return getattr(self, PaletteType.parse(palette_type).attribute)

    def seed(self, palette_type: Union[PaletteType, str]) -> str:
        return getattr(self, f"{PaletteType.parse(palette_type).attribute}_seed")

    @property
    def palettes(self) -> Dict[PaletteType, TonalPalette]:
        return {palette_type: self.palette(palette_type) for palette_type in PaletteType}

    def to_dict(self) -> Dict[str, Any]:
        """
        Render the record consumed by theme assembly.

        Returns:
            Dictionary with ``<type>Palette`` entries (tone to hex), the seed
            colors under their theme form keys and the palette mode
        """
        record: Dict[str, Any] = {
            f"{palette_type.value}Palette": self.palette(palette_type).to_dict()
            for palette_type in PaletteType
        }
        record.update({
            'primarySeed': self.primary_seed,
            'secondarySeed': self.secondary_seed,
            'tertiarySeed': self.tertiary_seed,
            'neutralSeedColor': self.neutral_seed,
            'neutralVariantSeedColor': self.neutral_variant_seed,
            'errorSeedColor': self.error_seed,
            'paletteMode': self.mode.value,
            'isCustomPalette': self.mode is PaletteMode.FULL,
        })
        return record
