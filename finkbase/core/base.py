"""
finkbase.core.base

Case-insensitive parameter store used as the base of fink objects.

Design: Keys are lower-cased on the way in. Empty values are never stored,
so "set to nothing" and "absent" are the same thing.
"""

import logging
import warnings
from typing import Any, Dict, Iterator, List, Mapping, Optional, TypeVar, Union, overload

from finkbase.config.schema import COLLISION_ERROR, COLLISION_WARN, ParameterConfig
from .exceptions import KeyCollisionError
from .keys import (
    compile_key_pattern,
    is_empty_value,
    is_reserved_key,
    key_matches,
    normalize_key,
    parse_boolean,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P", bound="ParameterObject")


class ParameterObject:
    """Loosely-typed parameter storage for fink objects.

    All parameter names are used case insensitively. Subclasses customize
    setup by overriding initialize(), which both constructors call after
    the store is populated.

    Usage:
        pkg = ParameterObject.create_from_mapping({"Package": "foo", "_file": "x"})
        pkg.get("package")          # "foo"
        pkg.has("_file")            # False (reserved keys are dropped)
        pkg.set("BuildDepends", "")  # deletes the parameter

    Attributes:
        config: Class-level ParameterConfig. Subclasses may override.
    """

    config: ParameterConfig = ParameterConfig()

    def __init__(self, *args, **kwargs):
        self._store: Dict[str, Any] = {}
        self.initialize(*args, **kwargs)

    @classmethod
    def create_empty(cls: "type[P]", *args, **kwargs) -> P:
        """Create an empty object and initialize it with the given arguments."""
        return cls(*args, **kwargs)

    @classmethod
    def create_from_mapping(cls: "type[P]", props: Mapping[str, Any], *args, **kwargs) -> P:
        """Create an object whose parameters are taken from props.

        Keys are lower-cased. Keys with a leading "_" are ignored, as are
        None and "" values. The remaining arguments go to initialize().

        Raw keys are applied in sorted order, so when two of them differ
        only in case the last one in that order wins regardless of how the
        mapping iterates. cls.config.collision_policy decides whether that
        is silent, a UserWarning or a KeyCollisionError.

        Raises:
            KeyCollisionError: On a case collision under the "error" policy.
        """
        policy = cls.config.collision_policy
        store: Dict[str, Any] = {}
        seen: Dict[str, str] = {}

        for raw_key in sorted(props):
            key = normalize_key(raw_key)
            if is_reserved_key(raw_key):
                logger.debug("Ignoring reserved property %r", raw_key)
                continue

            if key in seen:
                msg = f"Properties {seen[key]!r} and {raw_key!r} both map to parameter {key!r}"
                if policy == COLLISION_ERROR:
                    raise KeyCollisionError(msg)
                if policy == COLLISION_WARN:
                    warnings.warn(f"{msg}; using {raw_key!r}", UserWarning, stacklevel=2)
            seen[key] = raw_key

            value = props[raw_key]
            if is_empty_value(value):
                store.pop(key, None)
            else:
                store[key] = value

        obj = cls.__new__(cls)
        obj._store = store
        obj.initialize(*args, **kwargs)
        return obj

    from_properties = create_from_mapping

    def initialize(self, *args, **kwargs) -> None:
        """Post-construction hook.

        Called exactly once by every constructor, after the store is
        populated and before the object is returned. Receives the
        constructor's extra arguments, never the property mapping.
        The default does nothing.
        """
        pass

    # -------------------------------------------------------------------------
    # Parameter queries
    # -------------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value of key, or default if it is not set."""
        return self._store.get(normalize_key(key), default)

    def set(self, key: str, value: Any) -> None:
        """Set key to value. None or "" deletes the parameter."""
        key = normalize_key(key)
        if is_empty_value(value):
            self._store.pop(key, None)
        else:
            self._store[key] = value

    def has(self, key: str) -> bool:
        """Return True if key is set."""
        return normalize_key(key) in self._store

    def get_with_fallback(self, key: str, default_value: Optional[Any] = "") -> Any:
        """Like get() but a missing parameter yields "" unless told otherwise.

        An explicit None default is treated like an omitted one. Other falsy
        defaults such as 0 or "0" are returned unchanged, not replaced by "".
        """
        if default_value is None:
            default_value = ""
        return self._store.get(normalize_key(key), default_value)

    @overload
    def get_boolean(self, key: str) -> Optional[bool]: ...

    @overload
    def get_boolean(self, key: str, default_value: T) -> Union[bool, T]: ...

    def get_boolean(self, key, default_value=None):
        """Interpret the value of key as a boolean.

        "true", "yes", "on" and "1" (any case, surrounding whitespace
        ignored) give True; any other stored value gives False. If key is
        not set, default_value is returned exactly as passed, so the result
        is tri-state: True, False or the default.
        """
        key = normalize_key(key)
        if key in self._store:
            return parse_boolean(self._store[key])
        return default_value

    def matching_params(self, pattern: Optional[str] = None, case_sensitive: bool = False) -> List[str]:
        """Return the parameter names that fully match a regular expression.

        The pattern must match a whole key, so "a." matches "ab" but not
        "apple" or "cat". Matching ignores case unless case_sensitive is
        set. Names come back in their stored (lower-case) form, in no
        particular order.

        Raises:
            PatternError: If pattern is not a valid regular expression.
        """
        regex = compile_key_pattern(pattern, case_sensitive)
        return [key for key in self._store if key_matches(regex, key)]

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def keys(self) -> List[str]:
        """Return sorted list of parameter names."""
        return sorted(self._store)

    def to_dict(self) -> Dict[str, Any]:
        """Return copy of parameters as dict."""
        return dict(self._store)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._store))

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={v!r}" for k, v in sorted(self._store.items()))
        return f"{type(self).__name__}({items})"

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._store == other._store

    __hash__ = None
