# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load :class:`~nixoptdoc.config.Config` from TOML and merge overrides."""

from __future__ import annotations

import logging
import os
import re
import tomllib
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .config import Config
from .errors import ConfigError

LOGGER = logging.getLogger(__name__)

CONFIG_FILENAME: Final[str] = "nix-options-doc.toml"
SECTION_NAMES: Final[tuple[str, ...]] = ("collect", "filter", "output")
_ENV_VAR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def _expand_env_string(value: str, env: Mapping[str, str]) -> str:
    def _replace(match: re.Match[str]) -> str:
        return env.get(match.group(1), match.group(0))

    return _ENV_VAR_PATTERN.sub(_replace, value)


def expand_env(value: Any, env: Mapping[str, str]) -> Any:
    """Expand ``${VAR}`` references in every string nested inside ``value``.

    Unset variables are left verbatim.
    """

    if isinstance(value, str):
        return _expand_env_string(value, env)
    if isinstance(value, Mapping):
        return {key: expand_env(item, env) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env(item, env) for item in value]
    return value


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated recursively with ``override``."""

    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def read_config_file(path: Path, *, env: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Return the tables of the TOML configuration at ``path``.

    Args:
        path: TOML document to read.
        env: Environment used for ``${VAR}`` expansion; ``os.environ`` by default.

    Returns:
        dict[str, Any]: Document with environment references expanded.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or holds
            tables other than ``collect``, ``filter`` and ``output``.
    """

    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration at {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    unknown = sorted(set(data) - set(SECTION_NAMES))
    if unknown:
        raise ConfigError(f"Unknown configuration section(s) in {path}: {', '.join(unknown)}")
    for name, section in data.items():
        if not isinstance(section, MutableMapping):
            raise ConfigError(f"Configuration section [{name}] in {path} must be a table")
    return expand_env(data, env if env is not None else os.environ)


def discover_config_file(root: Path) -> Path | None:
    """Return ``root/nix-options-doc.toml`` when it exists."""

    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def build_config(payload: Mapping[str, Any]) -> Config:
    """Validate ``payload`` into a :class:`Config`.

    Raises:
        ConfigError: If any key is unknown or any value is invalid.
    """

    try:
        return Config.model_validate(dict(payload))
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(f"Invalid configuration: {details}") from exc


def load_config(
    root: Path,
    *,
    config_file: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> Config:
    """Return the effective configuration for a run rooted at ``root``.

    Values from the TOML file (``config_file`` or the one found in ``root``)
    are overlaid with ``overrides``, which usually come from the command line.

    Args:
        root: Directory being documented.
        config_file: Explicit configuration path; must exist when given.
        overrides: Section-keyed values taking precedence over the file.
        env: Environment for ``${VAR}`` expansion.

    Returns:
        Config: Validated configuration.

    Raises:
        ConfigError: If the file is missing, malformed or holds invalid values.
    """

    if config_file is not None and not config_file.is_file():
        raise ConfigError(f"Configuration file not found: {config_file}")
    source = config_file or discover_config_file(root)
    payload: dict[str, Any] = {}
    if source is not None:
        LOGGER.debug("loading configuration from %s", source)
        payload = read_config_file(source, env=env)
    if overrides:
        payload = deep_merge(payload, overrides)
    return build_config(payload)


__all__ = [
    "CONFIG_FILENAME",
    "build_config",
    "deep_merge",
    "discover_config_file",
    "expand_env",
    "load_config",
    "read_config_file",
]
