"""Registry of checker kinds.

The checker package keeps one global :class:`CheckerRegistry` mapping kind
names (``"string"``, ``"siret"``, ...) to checker factories. Built-in kinds
register themselves when their module is imported; consumers add their own
through :func:`dataknobs_checker.register_checker`.

The registry is the common dataknobs :class:`~dataknobs_common.Registry`, so
duplicate kinds raise ``OperationError`` and lookup misses raise
``NotFoundError`` listing the available keys.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from dataknobs_common import Registry

if TYPE_CHECKING:
    from collections.abc import Callable

    from .checkers import Checker

logger = logging.getLogger(__name__)


class CheckerRegistry(Registry["Callable[..., Checker]"]):
    """Registry of checker factories keyed by kind name."""

    def __init__(self) -> None:
        super().__init__("checkers")

    def register_kind(
        self,
        kind: str,
        factory: Callable[..., Checker],
        *aliases: str,
        allow_overwrite: bool = False,
    ) -> None:
        """Register a factory under ``kind`` and any number of aliases."""
        for key in (kind, *aliases):
            self.register(key, factory, metadata={"kind": kind}, allow_overwrite=allow_overwrite)
        logger.debug(f"Registered checker kind '{kind}' (aliases: {list(aliases)})")

    def build(self, kind: str, options: Any = None, **kwargs: Any) -> Checker:
        """Build a checker of ``kind`` from options.

        Raises:
            NotFoundError: If no factory is registered for ``kind``
        """
        return self.get(kind)(options, **kwargs)

    def __repr__(self) -> str:
        return f"CheckerRegistry(count={self.count()})"


checker_registry = CheckerRegistry()

__all__ = ["CheckerRegistry", "checker_registry"]
