"""Extend a registered checker kind with a custom check.

The custom check runs after the base checker has accepted the value and
decides the outcome:

- ``False``: the value is invalid
- ``None`` or ``True``: the base checker's result stands
- anything else: returned as the sanitized replacement value

Example:
    ```python
    from dataknobs_checker import extend

    def even_length(value, context):
        return len(value) % 2 == 0

    pin = extend({"regex": r"[0-9]+"}, {"type": "string", "check": even_length})
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .checkers import Checker
from .exceptions import InvalidFieldError, ensure
from .options import CheckerOptions
from .registry import checker_registry
from .result import CheckContext

logger = logging.getLogger(__name__)

ExtensionCheck = Callable[[Any, CheckContext], Any]


class ExtendedChecker(Checker):
    """A base checker followed by a custom check."""

    def __init__(self, base: Checker, check: ExtensionCheck):
        """Initialize with a built base checker and the custom check.

        Args:
            base: Checker that runs first
            check: Callable taking (value, context)
        """
        self.base = base
        self.extension = check
        self.options = base.options

    @property
    def base_kind(self) -> str:
        return self.base.kind

    def is_type(self, value: Any) -> bool:
        return self.base.is_type(value)

    def check(self, value: Any, context: CheckContext) -> Any:
        result = self.base.check(value, context)
        # Absent and accepted by the base checker: nothing for the extension to see
        if value is None:
            return result

        outcome = self.extension(value, context)
        if outcome is False:
            raise InvalidFieldError.at(context.ariane)
        if outcome is None or outcome is True:
            return result
        return outcome

    def __repr__(self) -> str:
        name = getattr(self.extension, "__name__", type(self.extension).__name__)
        return f"ExtendedChecker(base={self.base!r}, check={name})"


def extend(
    options: CheckerOptions | Mapping[str, Any] | None = None,
    extension: Mapping[str, Any] | None = None,
    *,
    kind: str | None = None,
    check: ExtensionCheck | None = None,
) -> ExtendedChecker:
    """Build a checker of a registered kind and chain a custom check after it.

    The kind and check are given either as an ``extension`` mapping with
    ``type`` and ``check`` keys, or as the ``kind`` and ``check`` keywords.
    Mapping entries take precedence.

    Args:
        options: Options for the base checker
        extension: Mapping with ``type`` (registered kind) and ``check``
        kind: Registered checker kind to extend
        check: Custom check taking (value, context)

    Returns:
        The extended checker

    Raises:
        CheckerAssertionError: If the kind is not a registered kind or the
            check is not callable
    """
    if extension is not None:
        ensure(isinstance(extension, Mapping), "extension must be a mapping with 'type' and 'check'")
        unknown = sorted(str(key) for key in extension if key not in ("type", "check"))
        ensure(not unknown, f"unknown extension keys: {', '.join(unknown)}", unknown=unknown)
        kind = extension.get("type", kind)
        check = extension.get("check", check)

    ensure(isinstance(kind, str), "no type to extend")
    ensure(callable(check), "no check method")
    factory = checker_registry.get_optional(kind)  # type: ignore[arg-type]
    ensure(factory is not None, f"type '{kind}' unknown to the checker registry", checker_kind=kind)

    base = factory(options)  # type: ignore[misc]
    logger.debug(f"Extending {kind} checker with {getattr(check, '__name__', check)!r}")
    return ExtendedChecker(base, check)  # type: ignore[arg-type]
