"""
finkbase.config.schema

Configuration schema using dataclasses.

Design: Every field has a default; values are checked in __post_init__.
"""

from dataclasses import dataclass
from typing import Tuple

# What create_from_mapping does when two raw keys lower-case to the same name
COLLISION_LAST = "last"    # last key in sorted order wins, silently
COLLISION_WARN = "warn"    # last key wins, UserWarning emitted
COLLISION_ERROR = "error"  # KeyCollisionError raised

COLLISION_POLICIES: Tuple[str, ...] = (COLLISION_LAST, COLLISION_WARN, COLLISION_ERROR)


@dataclass(frozen=True)
class ParameterConfig:
    """Behaviour knobs for ParameterObject construction."""
    collision_policy: str = COLLISION_WARN  # "last" | "warn" | "error"
    
    def __post_init__(self):
        if self.collision_policy not in COLLISION_POLICIES:
            raise ValueError(
                f"Invalid collision_policy: {self.collision_policy!r} "
                f"(expected one of {', '.join(COLLISION_POLICIES)})"
            )
    
    @classmethod
    def strict(cls) -> "ParameterConfig":
        """Factory for a config that refuses case-colliding properties."""
        return cls(collision_policy=COLLISION_ERROR)
