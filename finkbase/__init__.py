"""
finkbase

Basic parameter handling for fink objects.
"""

from .core import (
    ParameterObject,
    FinkError,
    PatternError,
    KeyCollisionError,
    ConfigError,
)
from .config import ParameterConfig, load_config

__version__ = "1.0.0"

__all__ = [
    "ParameterObject",
    "FinkError",
    "PatternError",
    "KeyCollisionError",
    "ConfigError",
    "ParameterConfig",
    "load_config",
]
