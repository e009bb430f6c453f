"""Exception hierarchy for the checker package.

Errors are built on the common dataknobs exceptions: everything raised here
is a :class:`dataknobs_common.DataknobsError` carrying a message plus a
context dictionary, so callers catching dataknobs errors across packages
see checker failures too.

Validation failures are :class:`ValidationError` instances tagged with an
:class:`ErrorKind` and the dotted path of the offending field:

- ``missing``: a mandatory field is absent (and the check is not partial)
- ``invalid``: a field is present but fails its checker
- ``invalidSchema``: a schema definition is malformed
- ``assertion``: a checker factory or ``extend`` was misused

Example:
    ```python
    from dataknobs_checker import ErrorKind, ValidationError

    try:
        schema.check(payload)
    except ValidationError as e:
        if e.kind is ErrorKind.MISSING:
            return 400, f"{e.path} is required"
        raise
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from dataknobs_common import (
    ConfigurationError,
    DataknobsError,
    NotFoundError,
    OperationError,
    ValidationError as BaseValidationError,
)

# Package base is the common dataknobs base
CheckerError = DataknobsError


class ErrorKind(str, Enum):
    """Tag identifying the category of a validation failure."""

    MISSING = "missing"
    INVALID = "invalid"
    INVALID_SCHEMA = "invalidSchema"
    ASSERTION = "assertion"

    def __str__(self) -> str:
        return self.value


class ValidationError(BaseValidationError):
    """A tagged validation failure.

    Attributes:
        kind: The :class:`ErrorKind` of the failure
        path: Dotted path of the field that failed (empty for the root)
    """

    kind: ErrorKind = ErrorKind.INVALID

    def __init__(
        self,
        message: str,
        path: str = "",
        context: dict[str, Any] | None = None,
    ):
        context = dict(context or {})
        context.setdefault("kind", self.kind.value)
        context.setdefault("path", path)
        super().__init__(message, context=context)
        self.path = path

    @classmethod
    def at(cls, path: str) -> ValidationError:
        """Build the standard ``"<path> is <kind>"`` error for a field."""
        return cls(f"{path or 'value'} is {cls.kind.value}", path=path)


class MissingFieldError(ValidationError):
    """A mandatory field is absent."""

    kind = ErrorKind.MISSING


class InvalidFieldError(ValidationError):
    """A field value fails its checker."""

    kind = ErrorKind.INVALID


class InvalidSchemaError(ValidationError):
    """A schema definition contains something other than checkers and mappings."""

    kind = ErrorKind.INVALID_SCHEMA


class CheckerAssertionError(ValidationError, AssertionError):
    """A checker factory received options it cannot work with.

    This is a programming error raised while building checkers, never while
    checking data.
    """

    kind = ErrorKind.ASSERTION


def ensure(condition: bool, message: str, **context: Any) -> None:
    """Raise :class:`CheckerAssertionError` with ``message`` unless ``condition`` holds."""
    if not condition:
        raise CheckerAssertionError(message, context=context)


__all__ = [
    "ErrorKind",
    "CheckerError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
    "ValidationError",
    "MissingFieldError",
    "InvalidFieldError",
    "InvalidSchemaError",
    "CheckerAssertionError",
    "ensure",
]
