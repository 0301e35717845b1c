"""
finkbase.core.types

Constants shared by the parameter store.
"""

from typing import FrozenSet

# Property keys starting with this prefix are private and never stored
RESERVED_PREFIX = "_"

# Whole-string spellings (after strip + lower) read as boolean true
TRUE_SPELLINGS: FrozenSet[str] = frozenset({"true", "yes", "on", "1"})
