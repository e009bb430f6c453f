"""Checker options: the per-field rules a checker is built from.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from re import Pattern
from typing import Any

from .exceptions import ensure

# Accepted spellings of the regex option, in priority order.
REGEX_ALIASES = ("re", "reg", "regex")


@dataclass(frozen=True)
class CheckerOptions:
    """Immutable rules captured by a checker.

    Only the options meaningful to a checker's type are consulted; the
    others are ignored.

    Attributes:
        mandatory: The value can't be None (unless the check is partial)
        value: Exact value the field must have
        max_length: Maximum length of a string or array (inclusive)
        min_length: Minimum length of a string or array (inclusive)
        length: Exact length of a string or array
        regex: Pattern the whole string must match
        is_float: The number must have a fractional part
        is_integer: The number must have no fractional part
        is_positive: The number must be >= 0
        is_negative: The number must be <= 0
        is_not_null: The number must be != 0
        minimum: Bottom of the number range (inclusive)
        maximum: Top of the number range (inclusive)
    """

    mandatory: bool = False
    value: Any = None
    max_length: int | None = None
    min_length: int | None = None
    length: int | None = None
    regex: str | Pattern[str] | None = None
    is_float: bool = False
    is_integer: bool = False
    is_positive: bool = False
    is_negative: bool = False
    is_not_null: bool = False
    minimum: float | None = None
    maximum: float | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CheckerOptions:
        """Create options from a mapping of option names.

        ``re``, ``reg`` and ``regex`` are aliases; the first non-empty one
        wins.

        Raises:
            CheckerAssertionError: If the mapping holds an unknown option
        """
        data = dict(data)
        regex = None
        for alias in REGEX_ALIASES:
            candidate = data.pop(alias, None)
            if regex is None and candidate:
                regex = candidate
        if regex is not None:
            data["regex"] = regex

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        ensure(not unknown, f"unknown checker options: {', '.join(unknown)}", options=unknown)
        return cls(**data)

    @classmethod
    def coerce(cls, options: CheckerOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> CheckerOptions:
        """Normalize the option forms accepted by checker factories.

        Args:
            options: Existing options, a mapping, or None
            **kwargs: Individual options, overriding ``options``

        Returns:
            A CheckerOptions instance (never the caller's mapping)
        """
        if options is None:
            base = cls()
        elif isinstance(options, CheckerOptions):
            base = options
        else:
            ensure(
                isinstance(options, Mapping),
                f"checker options must be a mapping, got {type(options).__name__}",
            )
            base = cls.from_mapping(options)

        if kwargs:
            overrides = cls.from_mapping(kwargs)
            base = replace(base, **{key: getattr(overrides, key) for key in _given_keys(kwargs)})
        return base

    def with_changes(self, **changes: Any) -> CheckerOptions:
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)


def _given_keys(kwargs: Mapping[str, Any]) -> list[str]:
    return ["regex" if key in REGEX_ALIASES else key for key in kwargs]
