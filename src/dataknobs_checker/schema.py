"""Schema trees and the recursive check over them.

A schema definition is either a checker (any callable taking
``(value, context)``) or a mapping from field names to definitions. The
definition is validated and compiled into a tree of :class:`Leaf` and
:class:`Branch` nodes once, when the :class:`Schema` is created.

Checking walks the input value along the tree:

- a branch requires a mutable mapping, drops every key the branch doesn't
  describe, then checks each described field in schema order
- a leaf calls its checker; in sanitize mode a returned value replaces the
  field in its containing mapping
- the first error stops the walk

Example:
    ```python
    from dataknobs_checker import Schema, number, siret, string

    schema = Schema({
        "name": string(mandatory=True, max_length=64),
        "company": {
            "siret": siret(mandatory=True),
            "employees": number(is_integer=True, is_positive=True),
        },
    })

    data = {"name": "Acme", "company": {"siret": "53268510400012"}, "extra": 1}
    schema.check(data, sanitize=True)
    # {'name': 'Acme', 'company': {'siret': '532 685 104 00012'}}
    ```
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, MutableMapping
from types import MappingProxyType
from typing import Any

from .config import CheckOptions
from .exceptions import InvalidFieldError, InvalidSchemaError, MissingFieldError, ValidationError
from .result import CheckContext, CheckResult

logger = logging.getLogger(__name__)


class SchemaNode(ABC):
    """A node of a compiled schema tree."""

    @abstractmethod
    def check(self, value: Any, context: CheckContext, parent: MutableMapping[str, Any] | None) -> Any:
        """Check ``value`` against this node.

        Args:
            value: Value found at this node's path (None when absent)
            context: Context carrying this node's path
            parent: Mapping holding ``value``, None at the root

        Returns:
            The value now held at this node's path
        """


class Leaf(SchemaNode):
    """A node checked by a single checker."""

    def __init__(self, checker: Callable[[Any, CheckContext], Any]):
        self.checker = checker

    def check(self, value: Any, context: CheckContext, parent: MutableMapping[str, Any] | None) -> Any:
        result = self.checker(value, context)
        if result is None or not context.sanitize:
            return value
        if parent is not None:
            parent[context.key] = result
        return result

    def __repr__(self) -> str:
        return f"Leaf({self.checker!r})"


class Branch(SchemaNode):
    """A node describing the fields of a mapping."""

    def __init__(self, children: dict[str, SchemaNode]):
        self.children: Mapping[str, SchemaNode] = MappingProxyType(dict(children))

    def check(self, value: Any, context: CheckContext, parent: MutableMapping[str, Any] | None) -> Any:
        if not isinstance(value, MutableMapping):
            raise InvalidFieldError.at(context.ariane)

        for key in [key for key in value if key not in self.children]:
            del value[key]

        for key, node in self.children.items():
            node.check(value.get(key), context.child(key), value)
        return value

    def __repr__(self) -> str:
        return f"Branch({list(self.children)!r})"


class Schema:
    """A validated schema tree.

    Args:
        definition: A checker, or a mapping of field names to definitions.
            Another Schema may be used anywhere a definition is expected.
        options: Default check options for :meth:`check`

    Raises:
        InvalidSchemaError: If any node is neither callable nor a mapping
            with string keys
    """

    def __init__(
        self,
        definition: Any,
        options: CheckOptions | Mapping[str, Any] | None = None,
    ):
        self._root = _compile(definition, "")
        self.options = CheckOptions.coerce(options)
        logger.debug(f"Created schema: {self._root!r}")

    @property
    def root(self) -> SchemaNode:
        return self._root

    @property
    def fields(self) -> tuple[str, ...]:
        """Top-level field names (empty when the schema is a single checker)."""
        if isinstance(self._root, Branch):
            return tuple(self._root.children)
        return ()

    def check(
        self,
        value: Any,
        options: CheckOptions | Mapping[str, Any] | None = None,
        **overrides: bool,
    ) -> Any:
        """Check a value against the schema.

        Keys the schema doesn't describe are removed from ``value``. With
        ``sanitize``, values returned by checkers are written back in place.

        Args:
            value: Value to check
            options: Check options, defaulting to the schema's options
            **overrides: Individual options (``sanitize``, ``partial``)

        Returns:
            The checked value (for a mapping, the same object)

        Raises:
            MissingFieldError: If a mandatory field is absent
            InvalidFieldError: If a field fails its checker
        """
        options = (self.options if options is None else CheckOptions.coerce(options)).merge(overrides)
        context = CheckContext.from_options(options)
        try:
            return self._root.check(value, context, None)
        except ValidationError as e:
            logger.debug(f"Check failed ({e.kind}) at '{e.path}': {e}")
            raise

    def validate(
        self,
        value: Any,
        options: CheckOptions | Mapping[str, Any] | None = None,
        **overrides: bool,
    ) -> CheckResult:
        """Check a value, reporting a data error as a result instead of raising.

        Only ``missing`` and ``invalid`` errors are captured; the first one
        ends the check as with :meth:`check`.
        """
        try:
            return CheckResult.success(self.check(value, options, **overrides))
        except (MissingFieldError, InvalidFieldError) as e:
            return CheckResult.failure(value, e)

    def __repr__(self) -> str:
        return f"Schema({self._root!r})"


def _compile(definition: Any, path: str) -> SchemaNode:
    if isinstance(definition, Schema):
        return definition.root

    if isinstance(definition, Mapping):
        children: dict[str, SchemaNode] = {}
        for key, sub_definition in definition.items():
            if not isinstance(key, str):
                raise InvalidSchemaError(
                    f"input schema is invalid: key {key!r} at {path or 'root'} is not a string",
                    path=path,
                )
            children[key] = _compile(sub_definition, f"{path}.{key}" if path else key)
        return Branch(children)

    if callable(definition):
        return Leaf(definition)

    raise InvalidSchemaError(
        f"input schema is invalid at {path or 'root'}: "
        f"expected a checker or a mapping, got {type(definition).__name__}",
        path=path,
    )
