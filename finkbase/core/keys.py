"""
finkbase.core.keys

Key normalization and matching helpers.

Design: Keys are compared lower-cased everywhere. Patterns always match
whole keys.
"""

import re
from typing import Any, Optional, Pattern

from .exceptions import PatternError
from .types import RESERVED_PREFIX, TRUE_SPELLINGS


def normalize_key(key: str) -> str:
    """Return the stored form of a parameter name.
    
    Raises:
        TypeError: If key is not a string.
    """
    if not isinstance(key, str):
        raise TypeError(f"Parameter name must be str, got {type(key).__name__}")
    return key.lower()


def is_reserved_key(key: str) -> bool:
    """True if a raw property key is private (leading underscore)."""
    return key.startswith(RESERVED_PREFIX)


def is_empty_value(value: Any) -> bool:
    """True for the values that mean "no value": None and ''."""
    return value is None or (isinstance(value, str) and value == "")


def parse_boolean(value: Any) -> bool:
    """Interpret a stored value as a boolean.
    
    "true", "yes", "on" and "1" (any case, surrounding whitespace ignored)
    are true. Everything else is false; nothing raises.
    """
    return str(value).strip().lower() in TRUE_SPELLINGS


def compile_key_pattern(pattern: Optional[str], case_sensitive: bool = False) -> Pattern[str]:
    """Compile a key pattern.
    
    The pattern is compiled as given; callers test keys with fullmatch()
    so only whole keys qualify.
    
    Args:
        pattern: Regular expression for whole keys. None means "".
        case_sensitive: Match case exactly instead of ignoring it.
    
    Raises:
        PatternError: If the pattern is not a valid regular expression.
    """
    if pattern is None:
        pattern = ""
    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise PatternError(
            f"Invalid parameter pattern {pattern!r}: {e.msg}", pattern, e.pos
        ) from e


def key_matches(regex: Pattern[str], key: str) -> bool:
    """True if regex matches all of key, not just a prefix or substring."""
    return regex.fullmatch(key) is not None
