# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the extraction pipeline and its front-ends."""

from __future__ import annotations

from pathlib import Path


class OptionsDocError(Exception):
    """Base class for failures that abort a documentation run."""


class ConfigError(OptionsDocError):
    """Raised when configuration input is invalid."""


class RootNotFoundError(OptionsDocError):
    """Raised when the directory to collect options from does not exist."""

    def __init__(self, root: Path) -> None:
        """Record the missing ``root`` for reporting.

        Args:
            root: Directory that was requested but could not be found.
        """

        super().__init__(f"Source directory does not exist or is not a directory: {root}")
        self.root = root


class GrammarUnavailableError(OptionsDocError):
    """Raised when no Tree-sitter grammar for Nix can be loaded."""


class SourceParseError(OptionsDocError):
    """Raised when a single source file cannot be turned into a syntax tree.

    The collector treats this as a per-file failure: the file is logged and
    skipped while sibling files continue to be processed.
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Parsing error in file {path}: {reason}")
        self.path = path
        self.reason = reason


class RepositoryFetchError(OptionsDocError):
    """Raised when a remote repository cannot be cloned."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"Failed to clone repository {location}: {reason}")
        self.location = location
        self.reason = reason


class RenderError(OptionsDocError):
    """Raised when a renderer cannot serialise the collected options."""


__all__ = [
    "ConfigError",
    "GrammarUnavailableError",
    "OptionsDocError",
    "RenderError",
    "RepositoryFetchError",
    "RootNotFoundError",
    "SourceParseError",
]
