"""Check options: how a schema check runs.

Options can be given per call, built from a dictionary, read from the
environment or loaded from a YAML/JSON file. Files and environment
variables go through :mod:`dataknobs_config`, so they follow its layout:
the options live in a ``checker`` configuration.

Environment variable format (dataknobs_config overrides):
    DATAKNOBS_CHECKER__0__<OPTION>

Examples:
    - DATAKNOBS_CHECKER__0__SANITIZE=true
    - DATAKNOBS_CHECKER__0__PARTIAL=no

File format:
    ```yaml
    checker:
      sanitize: true
      partial: false
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from dataknobs_common import NotFoundError
from dataknobs_config import Config, ValidationError as ConfigValidationError
from dataknobs_config.environment import EnvironmentOverrides

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = EnvironmentOverrides.ENV_PREFIX
CONFIG_SECTION = "checker"

# Attributes dataknobs_config adds to every atomic configuration
_CONFIG_ATTRIBUTES = ("type", "name")


@dataclass(frozen=True)
class CheckOptions:
    """Options accepted by :meth:`Schema.check`.

    Attributes:
        sanitize: Let checkers normalize field values, written back in place
        partial: Skip mandatory-field enforcement (partial updates)
    """

    sanitize: bool = False
    partial: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CheckOptions:
        """Create options from a dictionary.

        Raises:
            ConfigurationError: On unknown keys or non-boolean values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown check options: {', '.join(unknown)}",
                context={"unknown": unknown, "known": sorted(known)},
            )
        values = {}
        for key, value in data.items():
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"Check option '{key}' must be a boolean, got {type(value).__name__}",
                    context={"option": key, "value": value},
                )
            values[key] = value
        return cls(**values)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> CheckOptions:
        """Create options from environment variables.

        Reads the ``checker`` overrides (index 0) collected by
        :class:`dataknobs_config.environment.EnvironmentOverrides`.

        Args:
            prefix: Environment variable prefix

        Raises:
            ConfigurationError: If a variable holds a non-boolean value
        """
        env = EnvironmentOverrides(prefix)
        values = {}
        for ref, value in env.get_overrides().items():
            type_name, name_or_index, attribute = env.parse_env_reference(ref)
            if type_name == CONFIG_SECTION and name_or_index == 0 and attribute:
                values[attribute] = value
        if values:
            logger.debug(f"Check options from environment: {values}")
        return cls.from_dict(values)

    @classmethod
    def from_file(cls, path: str | Path) -> CheckOptions:
        """Create options from the ``checker`` configuration of a YAML or JSON file.

        A file without a ``checker`` configuration gives the defaults.

        Raises:
            ConfigurationError: If the file is missing, has an unsupported
                format or holds invalid options
        """
        try:
            config = Config(path, use_env=False)
        except (NotFoundError, ConfigValidationError) as e:
            raise ConfigurationError(str(e), context={"path": str(path)}) from e
        except (AttributeError, TypeError) as e:
            raise ConfigurationError(
                f"Configuration file must map configuration types to settings: {path}",
                context={"path": str(path)},
            ) from e

        if CONFIG_SECTION not in config.get_types():
            return cls()
        data = config.get(CONFIG_SECTION)
        return cls.from_dict({key: value for key, value in data.items() if key not in _CONFIG_ATTRIBUTES})

    @classmethod
    def coerce(cls, options: CheckOptions | Mapping[str, Any] | None) -> CheckOptions:
        """Normalize the option forms accepted by :meth:`Schema.check`."""
        if options is None:
            return cls()
        if isinstance(options, CheckOptions):
            return options
        return cls.from_dict(options)

    def merge(self, overrides: Mapping[str, Any] | None = None, **kwargs: Any) -> CheckOptions:
        """Return a copy with ``overrides`` and ``kwargs`` applied."""
        changes = dict(overrides or {}, **kwargs)
        if not changes:
            return self
        validated = CheckOptions.from_dict(changes)
        return replace(self, **{key: getattr(validated, key) for key in changes})
