# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem discovery of Nix source files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from ..config import CollectionConfig

LOGGER = logging.getLogger(__name__)

HIDDEN_PREFIX: Final[str] = "."


@dataclass(frozen=True, slots=True)
class SourceFile:
    """A discovered source file.

    Attributes:
        path: Absolute path used to read the file.
        relative: POSIX path relative to the collection root, as reported in records.
    """

    path: Path
    relative: str


@dataclass(frozen=True, slots=True)
class WalkContext:
    """Parameters required to walk the filesystem hierarchy."""

    root: Path
    excludes: frozenset[Path]
    suffix: str
    follow_symlinks: bool


def resolve_excludes(excludes: Iterable[Path], root: Path) -> frozenset[Path]:
    """Return absolute exclusion paths, resolving relative entries against ``root``.

    Args:
        excludes: Configured exclusion paths.
        root: Absolute collection root.

    Returns:
        frozenset[Path]: Normalised absolute exclusion paths.
    """

    return frozenset(Path(os.path.abspath(entry if entry.is_absolute() else root / entry)) for entry in excludes)


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


class FilesystemDiscovery:
    """Traverse a directory tree collecting Nix source files."""

    def discover(self, config: CollectionConfig, root: Path) -> list[SourceFile]:
        """Return the source files under ``root`` that should be processed.

        Hidden entries below ``root`` and everything under an exclusion path
        are skipped, as is any entry that is not a regular file with the
        configured extension.

        Args:
            config: Collection settings (excludes, extension, symlink policy).
            root: Existing directory to traverse.

        Returns:
            list[SourceFile]: Discovered files sorted by relative path.
        """

        base = Path(os.path.abspath(root))
        context = WalkContext(
            root=base,
            excludes=resolve_excludes(config.excludes, base),
            suffix=f".{config.extension}",
            follow_symlinks=config.follow_symlinks,
        )
        found = sorted(self._walk(context), key=lambda source: source.relative)
        LOGGER.debug("discovered %d source file(s) under %s", len(found), base)
        return found

    def _walk(self, context: WalkContext) -> Iterator[SourceFile]:
        """Walk ``context.root`` yielding files within scope."""

        for dirpath, dirnames, filenames in os.walk(context.root, followlinks=context.follow_symlinks):
            current = Path(dirpath)
            dirnames[:] = [name for name in dirnames if not self._should_skip_directory(current / name, context)]
            for filename in filenames:
                candidate = current / filename
                if self._is_excluded(candidate, context):
                    continue
                yield SourceFile(path=candidate, relative=candidate.relative_to(context.root).as_posix())

    def _should_skip_directory(self, path: Path, context: WalkContext) -> bool:
        """Return whether ``path`` should not be traversed."""

        if is_hidden(path.name):
            LOGGER.debug("skipping hidden directory %s", path)
            return True
        if any(path.is_relative_to(ex) for ex in context.excludes):
            LOGGER.debug("skipping excluded directory %s", path)
            return True
        return False

    def _is_excluded(self, candidate: Path, context: WalkContext) -> bool:
        """Return whether ``candidate`` should be left out of the results."""

        if is_hidden(candidate.name) or candidate.suffix != context.suffix:
            return True
        if any(candidate.is_relative_to(ex) for ex in context.excludes):
            LOGGER.debug("skipping excluded file %s", candidate)
            return True
        if not context.follow_symlinks and candidate.is_symlink():
            return True
        return not candidate.is_file()


__all__ = ["FilesystemDiscovery", "SourceFile", "WalkContext", "is_hidden", "resolve_excludes"]
