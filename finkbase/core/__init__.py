"""
finkbase.core

Core parameter handling for fink objects.

Exports:
- Exception classes
- Key constants and helpers
- ParameterObject
"""

from .exceptions import (
    FinkError,
    PatternError,
    KeyCollisionError,
    ConfigError,
)

from .types import (
    RESERVED_PREFIX,
    TRUE_SPELLINGS,
)

from .keys import (
    normalize_key,
    is_reserved_key,
    is_empty_value,
    parse_boolean,
    compile_key_pattern,
    key_matches,
)

from .base import ParameterObject

__all__ = [
    # Exceptions
    "FinkError",
    "PatternError",
    "KeyCollisionError",
    "ConfigError",
    # Constants
    "RESERVED_PREFIX",
    "TRUE_SPELLINGS",
    # Keys
    "normalize_key",
    "is_reserved_key",
    "is_empty_value",
    "parse_boolean",
    "compile_key_pattern",
    "key_matches",
    # Store
    "ParameterObject",
]
