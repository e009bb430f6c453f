"""Build checkers by kind name."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from . import derived  # noqa: F401  (registers the derived kinds)
from .checkers import Checker
from .exceptions import ensure
from .options import CheckerOptions
from .registry import checker_registry

logger = logging.getLogger(__name__)


def build_checker(
    kind: str,
    options: CheckerOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> Checker:
    """Build a checker of a registered kind.

    Built-in kinds: boolean, number, string, array, mac, ipv4 (alias ip),
    ipv6, objectId (alias objectID), email and siret.

    Args:
        kind: Checker kind name
        options: Checker options (CheckerOptions or mapping)
        **kwargs: Individual options, overriding ``options``

    Returns:
        The checker

    Raises:
        CheckerAssertionError: If ``kind`` is unknown or the options are
            unsuitable
    """
    factory = checker_registry.get_optional(kind)
    ensure(
        factory is not None,
        f"type '{kind}' unknown to the checker registry",
        checker_kind=kind,
        available_kinds=checker_registry.list_keys(),
    )
    return factory(options, **kwargs)  # type: ignore[misc]


def register_checker(
    kind: str,
    factory: Callable[..., Checker],
    allow_overwrite: bool = False,
) -> None:
    """Make a custom checker kind available to :func:`build_checker` and :func:`extend`.

    Args:
        kind: Name of the new kind
        factory: Callable taking (options, **kwargs) and returning a checker
        allow_overwrite: Replace an existing kind of the same name

    Raises:
        CheckerAssertionError: If ``factory`` is not callable
        OperationError: If ``kind`` exists and allow_overwrite is False
    """
    ensure(callable(factory), "checker factory must be callable", checker_kind=kind)
    checker_registry.register(kind, factory, allow_overwrite=allow_overwrite)
    logger.debug(f"Registered checker kind: {kind}")


def available_kinds() -> list[str]:
    """List the registered checker kind names."""
    return sorted(checker_registry.list_keys())
