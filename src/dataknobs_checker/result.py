"""Per-call check context and the non-raising check result.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import CheckOptions
    from .exceptions import ErrorKind, ValidationError


@dataclass(frozen=True)
class CheckContext:
    """State threaded through one traversal.

    A new context is derived for every nested field, so siblings never see
    each other's paths.

    Attributes:
        ariane: Dotted path of the field being checked ("" at the root)
        partial: Skip mandatory-field enforcement
        sanitize: Let checkers rewrite field values in place
    """

    ariane: str = ""
    partial: bool = False
    sanitize: bool = False

    @classmethod
    def from_options(cls, options: CheckOptions, ariane: str = "") -> CheckContext:
        return cls(ariane=ariane, partial=options.partial, sanitize=options.sanitize)

    @property
    def key(self) -> str:
        """Last segment of the path: the name of the field being checked."""
        return self.ariane.rpartition(".")[2]

    def child(self, key: str) -> CheckContext:
        """Derive the context for field ``key`` below the current one."""
        return replace(self, ariane=f"{self.ariane}.{key}" if self.ariane else key)


@dataclass
class CheckResult:
    """Outcome of :meth:`Schema.validate`.

    Holds the checked value and, on failure, the first error raised.
    """

    valid: bool
    value: Any
    error: ValidationError | None = None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    @property
    def path(self) -> str | None:
        return self.error.path if self.error is not None else None

    @classmethod
    def success(cls, value: Any) -> CheckResult:
        return cls(valid=True, value=value)

    @classmethod
    def failure(cls, value: Any, error: ValidationError) -> CheckResult:
        return cls(valid=False, value=value, error=error)
