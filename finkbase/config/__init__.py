"""
finkbase.config

Configuration management for finkbase.

Exports:
- Config schema and collision policies
- Loading/saving utilities
"""

from .schema import (
    ParameterConfig,
    COLLISION_LAST,
    COLLISION_WARN,
    COLLISION_ERROR,
    COLLISION_POLICIES,
)

from .load import (
    load_config,
    save_config,
    config_from_dict,
    config_to_dict,
)

__all__ = [
    # Schema
    "ParameterConfig",
    "COLLISION_LAST",
    "COLLISION_WARN",
    "COLLISION_ERROR",
    "COLLISION_POLICIES",
    # Load/save
    "load_config",
    "save_config",
    "config_from_dict",
    "config_to_dict",
]
