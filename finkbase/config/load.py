"""
finkbase.config.load

Config loading and saving.
"""

import yaml
from pathlib import Path
from typing import Union, Dict, Any

from .schema import ParameterConfig
from ..core.exceptions import ConfigError


def load_config(path: Union[str, Path]) -> ParameterConfig:
    """Load configuration from YAML file.
    
    An empty file yields the default configuration.
    """
    path = Path(path)
    
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    
    if raw is None:
        raw = {}
    return config_from_dict(raw)


def config_from_dict(d: Dict[str, Any]) -> ParameterConfig:
    """Create ParameterConfig from dictionary."""
    if not isinstance(d, dict):
        raise ConfigError(f"Config must be a mapping, got {type(d).__name__}")
    
    try:
        return ParameterConfig(**d.get("parameters", {}))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config: {e}") from e


def save_config(config: ParameterConfig, path: Union[str, Path]) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    
    d = config_to_dict(config)
    
    with open(path, "w") as f:
        yaml.dump(d, f, default_flow_style=False, sort_keys=False)


def config_to_dict(config: ParameterConfig) -> Dict[str, Any]:
    """Convert ParameterConfig to dictionary."""
    return {
        "parameters": {
            "collision_policy": config.collision_policy,
        },
    }
