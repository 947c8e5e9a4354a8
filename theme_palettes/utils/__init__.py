"""
Theme Palettes - Utilities Package
==================================
Logging and configuration file helpers.
"""

from theme_palettes.utils.logger import (
    JsonFormatter, LogCapture, setup_logger, get_logger, log_function_call
)
from theme_palettes.utils.io import load_config, save_config

__all__ = [
    'JsonFormatter', 'LogCapture', 'setup_logger', 'get_logger',
    'log_function_call', 'load_config', 'save_config'
]
