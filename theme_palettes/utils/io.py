"""
Input/output utilities for engine configuration files.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from theme_palettes.config import merge_config

logger = logging.getLogger(__name__)


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load engine settings from a JSON file, layered over the defaults.

    Args:
        config_path: Path to the configuration file

    Returns:
        Effective configuration dictionary
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            overrides = json.load(f)
    except Exception as e:
        logger.error(f"Error loading configuration from {config_path}: {e}")
        raise

    if not isinstance(overrides, dict):
        raise ValueError(f"Configuration file must hold a JSON object: {config_path}")

    return merge_config(overrides)


def save_config(
    config: Mapping[str, Any],
    output_path: Union[str, Path],
    create_dirs: bool = True
) -> None:
    """
    Save configuration to a JSON file.

    Args:
        config: Configuration mapping
        output_path: Path to save the configuration
        create_dirs: Whether to create parent directories if they don't exist
    """
    output_path = Path(output_path)

    if create_dirs:
        output_path.parent.mkdir(exist_ok=True, parents=True)

    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(dict(config), f, indent=2)
        logger.info(f"Configuration saved to: {output_path}")
    except Exception as e:
        logger.error(f"Error saving configuration to {output_path}: {e}")
        raise
