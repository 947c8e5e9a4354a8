"""
Configuration for the palette engine.
"""
from typing import Any, Dict, Mapping, Optional

from theme_palettes.config.default import DEFAULT_CONFIG


def merge_config(overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Build an effective configuration from the defaults and optional overrides.

    Args:
        overrides: Settings to replace; keys must exist in DEFAULT_CONFIG

    Returns:
        New configuration dictionary

    Raises:
        ValueError: If an override names an unknown setting
    """
    config = dict(DEFAULT_CONFIG)
    if not overrides:
        return config

    unknown = sorted(set(overrides) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

    config.update(overrides)
    return config


__all__ = [
    "DEFAULT_CONFIG",
    "merge_config",
]
