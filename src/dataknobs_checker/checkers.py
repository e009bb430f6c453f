"""Primitive checkers: boolean, number, string and array.

A checker is built once from :class:`CheckerOptions` and then called as
``checker(value, context)`` any number of times. It returns the value to keep
(possibly sanitized), returns None when the field is absent, and raises a
:class:`ValidationError` when the value is unacceptable.

Example:
    ```python
    from dataknobs_checker import CheckContext, number, string

    age = number(is_integer=True, minimum=0, maximum=150)
    name = string(mandatory=True, max_length=64)

    age(42, CheckContext(ariane="age"))       # 42
    name(None, CheckContext(ariane="name"))   # raises MissingFieldError
    ```
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from numbers import Real
from typing import Any, ClassVar

from .exceptions import InvalidFieldError, MissingFieldError, ensure
from .options import CheckerOptions
from .registry import checker_registry
from .result import CheckContext


class Checker(ABC):
    """Base class for checkers built from options.

    Subclasses define the type test (:meth:`is_type`) and the constraint
    test (:meth:`accepts`); the absent-value and exact-value rules are
    shared.
    """

    kind: ClassVar[str] = ""

    def __init__(self, options: CheckerOptions | Mapping[str, Any] | None = None, **kwargs: Any):
        """Initialize the checker.

        Args:
            options: Checker options (CheckerOptions or mapping)
            **kwargs: Individual options, overriding ``options``

        Raises:
            CheckerAssertionError: If the options don't suit this checker
        """
        self.options = CheckerOptions.coerce(options, **kwargs)
        if self.options.value is not None:
            ensure(
                self.is_type(self.options.value),
                f"options.value must be a {self.kind}",
                checker_kind=self.kind,
            )

    def __call__(self, value: Any, context: CheckContext | None = None) -> Any:
        return self.check(value, context if context is not None else CheckContext())

    def check(self, value: Any, context: CheckContext) -> Any:
        """Check a value.

        Args:
            value: Value to check
            context: Traversal context (path and modes)

        Returns:
            The value to keep, or None when the value is absent

        Raises:
            MissingFieldError: If a mandatory value is None in a full check
            InvalidFieldError: If the value is present but unacceptable
        """
        if value is None:
            if self.options.mandatory and not context.partial:
                raise MissingFieldError.at(context.ariane)
            return None

        if self.options.value is not None:
            if self.is_type(value) and self.matches_value(value):
                return self.canonical_value()
            raise InvalidFieldError.at(context.ariane)

        if self.is_type(value) and self.accepts(value):
            return value
        raise InvalidFieldError.at(context.ariane)

    @abstractmethod
    def is_type(self, value: Any) -> bool:
        """Check that value is of the checker's primitive type."""

    def accepts(self, value: Any) -> bool:
        """Check the configured constraints (value already has the right type)."""
        return True

    def matches_value(self, value: Any) -> bool:
        return bool(value == self.options.value)

    def canonical_value(self) -> Any:
        return self.options.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.options!r})"


class BooleanChecker(Checker):
    """Checks booleans. No constraints besides ``value``."""

    kind = "boolean"

    def is_type(self, value: Any) -> bool:
        return isinstance(value, bool)


class NumberChecker(Checker):
    """Checks real numbers (booleans are not numbers here)."""

    kind = "number"

    def __init__(self, options: CheckerOptions | Mapping[str, Any] | None = None, **kwargs: Any):
        super().__init__(options, **kwargs)
        for bound in ("minimum", "maximum"):
            limit = getattr(self.options, bound)
            if limit is not None:
                ensure(self.is_type(limit), f"options.{bound} must be a number", option=bound)

    def is_type(self, value: Any) -> bool:
        return isinstance(value, Real) and not isinstance(value, bool)

    def accepts(self, value: Any) -> bool:
        options = self.options
        ok = True
        if options.is_float:
            ok = ok and not _is_whole(value)
        if options.is_integer:
            ok = ok and _is_whole(value)
        if options.is_positive:
            ok = ok and value >= 0
        if options.is_negative:
            ok = ok and value <= 0
        if options.is_not_null:
            ok = ok and value != 0
        if options.maximum is not None:
            ok = ok and value <= options.maximum
        if options.minimum is not None:
            ok = ok and value >= options.minimum
        return ok


class _SizedChecker(Checker):
    """Shared length rules for strings and arrays."""

    def __init__(self, options: CheckerOptions | Mapping[str, Any] | None = None, **kwargs: Any):
        super().__init__(options, **kwargs)
        for bound in ("length", "min_length", "max_length"):
            limit = getattr(self.options, bound)
            if limit is not None:
                ensure(
                    isinstance(limit, int) and not isinstance(limit, bool) and limit >= 0,
                    f"options.{bound} must be a non-negative integer",
                    option=bound,
                )

    def accepts(self, value: Any) -> bool:
        options = self.options
        size = len(value)
        ok = True
        if options.length is not None:
            ok = ok and size == options.length
        if options.max_length is not None:
            ok = ok and size <= options.max_length
        if options.min_length is not None:
            ok = ok and size >= options.min_length
        return ok


class StringChecker(_SizedChecker):
    """Checks strings, optionally against a pattern matching the whole string."""

    kind = "string"

    def __init__(self, options: CheckerOptions | Mapping[str, Any] | None = None, **kwargs: Any):
        super().__init__(options, **kwargs)
        pattern = self.options.regex
        ensure(
            pattern is None or isinstance(pattern, (str, re.Pattern)),
            "options.regex must be a string or a compiled pattern",
        )
        self.regex: re.Pattern[str] | None = re.compile(pattern) if isinstance(pattern, str) else pattern

    def is_type(self, value: Any) -> bool:
        return isinstance(value, str)

    def accepts(self, value: Any) -> bool:
        ok = super().accepts(value)
        if self.regex is not None:
            ok = ok and self.regex.fullmatch(value) is not None
        return ok


class ArrayChecker(_SizedChecker):
    """Checks lists and tuples."""

    kind = "array"

    def __init__(self, options: CheckerOptions | Mapping[str, Any] | None = None, **kwargs: Any):
        super().__init__(options, **kwargs)
        # Private copy so later changes to the caller's list can't leak in
        self._expected = tuple(self.options.value) if self.options.value is not None else None

    def is_type(self, value: Any) -> bool:
        return isinstance(value, (list, tuple))

    def matches_value(self, value: Any) -> bool:
        expected = self._expected or ()
        return len(value) == len(expected) and all(a == b for a, b in zip(value, expected))

    def canonical_value(self) -> list[Any]:
        return list(self._expected or ())


def _is_whole(value: Any) -> bool:
    if isinstance(value, int):
        return True
    try:
        return float(value).is_integer()
    except (OverflowError, ValueError):
        return False


def boolean(options: CheckerOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> BooleanChecker:
    """Build a boolean checker."""
    return BooleanChecker(options, **kwargs)


def number(options: CheckerOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> NumberChecker:
    """Build a number checker."""
    return NumberChecker(options, **kwargs)


def string(options: CheckerOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> StringChecker:
    """Build a string checker."""
    return StringChecker(options, **kwargs)


def array(options: CheckerOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> ArrayChecker:
    """Build an array checker."""
    return ArrayChecker(options, **kwargs)


checker_registry.register_kind("boolean", boolean)
checker_registry.register_kind("number", number)
checker_registry.register_kind("string", string)
checker_registry.register_kind("array", array)
