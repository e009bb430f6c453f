"""Declarative value checking with schemas of composable checkers.

This package validates (and optionally sanitizes) nested values:

- **Checkers**: boolean, number, string and array checkers built from
  options, plus string formats (mac, ipv4, ipv6, objectId, email, siret)
- **Extension**: chain a custom check after any registered checker kind
- **Schema**: a tree of checkers walked recursively, reporting the first
  failure with the dotted path of the offending field
- **Options**: partial checks for updates, sanitize mode for normalization

Example:
    ```python
    from dataknobs_checker import Schema, ValidationError, build_checker, string

    schema = Schema({
        "user": {
            "name": string(mandatory=True),
            "email": build_checker("email", mandatory=True),
        }
    })

    try:
        schema.check({"user": {"name": "Clem"}})
    except ValidationError as e:
        print(e.kind, e.path)
        # missing user.email
    ```
"""

from .checkers import (
    ArrayChecker,
    BooleanChecker,
    Checker,
    NumberChecker,
    StringChecker,
    array,
    boolean,
    number,
    string,
)
from .config import CheckOptions
from .derived import email, ipv4, ipv6, luhn_valid, mac, object_id, siret
from .exceptions import (
    CheckerAssertionError,
    CheckerError,
    ConfigurationError,
    ErrorKind,
    InvalidFieldError,
    InvalidSchemaError,
    MissingFieldError,
    NotFoundError,
    OperationError,
    ValidationError,
)
from .extension import ExtendedChecker, extend
from .factory import available_kinds, build_checker, register_checker
from .options import CheckerOptions
from .registry import CheckerRegistry, checker_registry
from .result import CheckContext, CheckResult
from .schema import Branch, Leaf, Schema, SchemaNode

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Checkers
    "Checker",
    "BooleanChecker",
    "NumberChecker",
    "StringChecker",
    "ArrayChecker",
    "ExtendedChecker",
    "boolean",
    "number",
    "string",
    "array",
    "mac",
    "ipv4",
    "ipv6",
    "object_id",
    "email",
    "siret",
    "luhn_valid",
    "extend",
    # Factory
    "build_checker",
    "register_checker",
    "available_kinds",
    "CheckerRegistry",
    "checker_registry",
    # Options and context
    "CheckerOptions",
    "CheckOptions",
    "CheckContext",
    "CheckResult",
    # Schema
    "Schema",
    "SchemaNode",
    "Leaf",
    "Branch",
    # Exceptions
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
]
