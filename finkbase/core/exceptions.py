"""
finkbase.core.exceptions

All custom exceptions for finkbase.

Design: Missing keys and odd boolean spellings are not errors. Only bad
patterns, colliding property keys and broken config raise.
"""

import re


class FinkError(Exception):
    """Base exception for all finkbase errors."""
    pass


class PatternError(FinkError, re.error):
    """Key enumeration pattern failed to compile.
    
    Also an ``re.error`` so callers catching the regex engine's own
    exception keep working. The engine's error is chained as __cause__.
    """
    
    def __init__(self, msg: str, pattern=None, pos=None):
        re.error.__init__(self, msg, pattern, pos)


class KeyCollisionError(FinkError):
    """Two property keys normalize to the same parameter name.
    
    Raised only under the "error" collision policy.
    """
    pass


class ConfigError(FinkError):
    """Configuration invalid or missing.
    
    Raised when config files are malformed or contain bad values.
    """
    pass
