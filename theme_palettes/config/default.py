"""
Default configuration settings for tonal palette derivation.
"""

DEFAULT_CONFIG = {
    # Seed defaults
    "default_primary_seed": "#343dff",  # Used when the primary seed is left empty
    "default_error_seed": "#B3261E",  # Error palettes are anchored to a literal color

    # Core palette rules (hue in degrees, chroma in CAM16 units)
    "primary_min_chroma": 48.0,  # Primary and error palettes never go below this
    "secondary_chroma": 16.0,
    "tertiary_chroma": 24.0,
    "tertiary_hue_rotation": 60.0,
    "neutral_chroma": 4.0,
    "neutral_variant_chroma": 8.0,
}
