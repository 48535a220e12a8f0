# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared CLI error type and value parsers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Final

KEY_VALUE_SEPARATOR: Final[str] = "="
LIST_SEPARATOR: Final[str] = ","


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


def parse_key_value(raw: str) -> tuple[str, str]:
    """Split ``KEY=VALUE`` into its parts.

    Raises:
        ValueError: If ``raw`` has no separator or an empty key.
    """

    key, separator, value = raw.partition(KEY_VALUE_SEPARATOR)
    if not separator or not key:
        raise ValueError(f"Invalid key=value format: {raw}")
    return key, value


def parse_replacements(values: Sequence[str] | None) -> dict[str, str]:
    """Return the substitution table described by repeated ``KEY=VALUE`` values."""

    return dict(parse_key_value(entry) for entry in values or ())


def split_list_values(values: Iterable[str] | None) -> list[str]:
    """Flatten repeated, comma-separated option values, dropping blanks."""

    cleaned: list[str] = []
    for entry in values or ():
        cleaned.extend(part.strip() for part in entry.split(LIST_SEPARATOR) if part.strip())
    return cleaned


def split_paths(values: Iterable[str] | None) -> list[Path]:
    return [Path(entry) for entry in split_list_values(values)]


__all__ = ["CLIError", "parse_key_value", "parse_replacements", "split_list_values", "split_paths"]
