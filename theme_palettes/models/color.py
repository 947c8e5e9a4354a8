"""
Seed color parsing and HCT conversion.

HCT pairs the CAM16 hue and chroma of a color with its CIE L* lightness
("tone"), the color model used by Material Design 3. Tonal palettes hold hue
and chroma fixed and vary tone; colors that fall outside sRGB at a given tone
have their chroma reduced until they fit.
"""

import math
import re
from typing import Tuple, Union

from coloraide import Color as _BaseColor
from coloraide.distance.delta_e_hct import DEHCT
from coloraide.gamut.fit_hct_chroma import HCTChroma
from coloraide.spaces.hct import HCT

# Type definitions
SeedValue = Union[str, int]
HctCoords = Tuple[float, float, float]  # (hue, chroma, tone)

# Constants
MAX_RGB_VALUE = 0xFFFFFF

_HEX_PATTERN = re.compile(r'^#?([0-9a-f]{3}|[0-9a-f]{6})$', re.IGNORECASE)


class Color(_BaseColor):
    """Package-local color class with HCT and its gamut mapping registered."""


Color.register([HCT(), DEHCT(), HCTChroma()], silent=True)


class ColorError(Exception):
    """Base exception for color-related errors."""
    pass


class ConversionFailure(ColorError):
    """A seed color cannot be converted to HCT."""
    pass


class MissingToneSample(ColorError):
    """A tone could not be sampled from an otherwise valid palette."""
    pass


def parse_seed(value: SeedValue) -> str:
    """
    Normalize a seed color to a lowercase ``#rrggbb`` string.

    Args:
        value: Hex string (``#RGB`` or ``#RRGGBB``, ``#`` optional) or a
            24-bit RGB integer

    Returns:
        Normalized hex string

    Raises:
        ConversionFailure: If the value is not a valid seed color
    """
    if isinstance(value, bool):
        raise ConversionFailure(f"Invalid seed color: {value!r}")

    if isinstance(value, int):
        if not 0 <= value <= MAX_RGB_VALUE:
            raise ConversionFailure(f"RGB integer out of range: {value:#x}")
        return f"#{value:06x}"

    if not isinstance(value, str):
        raise ConversionFailure(f"Unsupported seed color type: {type(value).__name__}")

    match = _HEX_PATTERN.match(value.strip())
    if not match:
        raise ConversionFailure(f"Invalid hex color: {value!r}")

    digits = match.group(1).lower()
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return f"#{digits}"


def seed_text(value: SeedValue) -> str:
    """Render a seed as text: strings as given, valid integers as hex."""
    if isinstance(value, str):
        return value
    try:
        return parse_seed(value)
    except ConversionFailure:
        return str(value)


def hex_to_hct(value: SeedValue) -> HctCoords:
    """
    Convert a seed color to HCT.

    Args:
        value: Seed color accepted by ``parse_seed``

    Returns:
        Tuple of (hue, chroma, tone); an undefined hue is reported as 0

    Raises:
        ConversionFailure: If the seed is malformed or cannot be converted
    """
    hex_string = parse_seed(value)
    try:
        hct = Color(hex_string).convert('hct')
        hue, chroma, tone = hct.get('hue'), hct.get('chroma'), hct.get('tone')
    except Exception as e:
        raise ConversionFailure(f"Failed to convert {hex_string} to HCT: {e}") from e

    if math.isnan(hue):
        hue = 0.0
    return hue % 360.0, max(0.0, chroma), tone


def _to_hex(color: Color) -> str:
    # Reduce chroma at constant hue and tone until the color fits in sRGB
    fitted = color.fit('srgb', method='hct-chroma')
    return fitted.convert('srgb').to_string(hex=True).lower()


def hct_to_hex(hue: float, chroma: float, tone: float) -> str:
    """
    Convert an HCT color to hex, reducing chroma until it fits in sRGB.

    Hue and tone are kept; out of gamut colors are fitted with coloraide's
    HCT chroma reduction.

    Args:
        hue: Hue angle in degrees
        chroma: Requested chroma
        tone: Tone in [0, 100]

    Returns:
        Lowercase ``#rrggbb`` string
    """
    if tone <= 0.0:
        return '#000000'
    if tone >= 100.0:
        return '#ffffff'
    return _to_hex(Color('hct', [hue, chroma, tone]))


def interpolate_hex(start: str, end: str, fraction: float) -> str:
    """
    Linearly interpolate two colors in HCT.

    Tone and chroma are interpolated linearly and hue along the shorter arc.
    An achromatic endpoint takes the hue of the other one.

    Args:
        start: Color at ``fraction == 0``
        end: Color at ``fraction == 1``
        fraction: Position between the two colors, in [0, 1]

    Returns:
        Lowercase ``#rrggbb`` string

    Raises:
        ConversionFailure: If either endpoint cannot be converted
    """
    fraction = min(1.0, max(0.0, fraction))
    endpoints = [parse_seed(start), parse_seed(end)]
    try:
        mix = Color.interpolate(endpoints, space='hct', hue='shorter', out_space='hct')
        return _to_hex(mix(fraction))
    except Exception as e:
        raise ConversionFailure(f"Failed to interpolate {endpoints[0]} and {endpoints[1]}: {e}") from e


class HctPalette:
    """
    A hue and chroma pair that can be sampled at any tone.

    This is the single sampling capability tonal palettes are built from.
    """

    __slots__ = ('_hue', '_chroma')

    def __init__(self, hue: float, chroma: float):
        self._hue = hue % 360.0
        self._chroma = max(0.0, chroma)

    @property
    def hue(self) -> float:
        return self._hue

    @property
    def chroma(self) -> float:
        return self._chroma

    def sample(self, tone: int) -> str:
        """
        Sample the palette at a tone.

        Args:
            tone: Tone stop in [0, 100]

        Returns:
            Lowercase ``#rrggbb`` string

        Raises:
            MissingToneSample: If the tone is out of range or cannot be converted
        """
        if not 0 <= tone <= 100:
            raise MissingToneSample(f"Tone out of range: {tone}")
        try:
            return hct_to_hex(self._hue, self._chroma, tone)
        except Exception as e:
            raise MissingToneSample(
                f"Failed to sample tone {tone} (hue={self._hue:.2f}, chroma={self._chroma:.2f}): {e}"
            ) from e

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HctPalette):
            return NotImplemented
        return (self._hue, self._chroma) == (other._hue, other._chroma)

    def __hash__(self) -> int:
        return hash((self._hue, self._chroma))

    def __repr__(self) -> str:
        return f"HctPalette(hue={self._hue:.2f}, chroma={self._chroma:.2f})"
