# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the directory to scan: a local path or a shallow git clone."""

from __future__ import annotations

import logging
import subprocess
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Final

from .errors import RepositoryFetchError
from .process import run_command

LOGGER = logging.getLogger(__name__)

GIT_EXECUTABLE: Final[str] = "git"
DEFAULT_CLONE_DEPTH: Final[int] = 1
CHECKOUT_DIR_NAME: Final[str] = "checkout"
_TEMP_PREFIX: Final[str] = "nix-options-doc-"


def build_clone_command(location: str, destination: Path, *, branch: str | None, depth: int) -> list[str]:
    """Return the ``git clone`` command line for a shallow checkout.

    Args:
        location: Repository URL.
        destination: Directory to clone into.
        branch: Branch or tag to check out; the remote default when ``None``.
        depth: Commit depth; values below one are raised to one.

    Returns:
        list[str]: Command arguments.
    """

    command = [GIT_EXECUTABLE, "clone", "--quiet", f"--depth={max(depth, DEFAULT_CLONE_DEPTH)}"]
    if branch:
        command.extend(["--branch", branch])
    command.extend(["--", location, str(destination)])
    return command


@contextmanager
def prepare_path(location: str | Path, branch: str | None = None, depth: int = DEFAULT_CLONE_DEPTH) -> Iterator[Path]:
    """Yield a local directory containing the sources at ``location``.

    An existing local path is yielded unchanged. Anything else is treated as a
    git URL and cloned into a temporary directory that is removed on exit,
    including when the clone is interrupted.

    Args:
        location: Local path or git URL.
        branch: Branch or tag to check out when cloning.
        depth: Clone depth when cloning.

    Yields:
        Path: Directory to collect options from.

    Raises:
        RepositoryFetchError: If the repository cannot be cloned.
    """

    local = Path(location)
    if local.exists():
        LOGGER.debug("found local path: %s", local)
        yield local
        return

    url = str(location)
    with tempfile.TemporaryDirectory(prefix=_TEMP_PREFIX) as scratch:
        destination = Path(scratch) / CHECKOUT_DIR_NAME
        command = build_clone_command(url, destination, branch=branch, depth=depth)
        LOGGER.debug("cloning %s into %s", url, destination)
        try:
            run_command(command)
        except FileNotFoundError as exc:
            raise RepositoryFetchError(url, str(exc)) from exc
        except subprocess.CalledProcessError as exc:
            reason = (exc.stderr or "").strip() or f"git exited with status {exc.returncode}"
            raise RepositoryFetchError(url, reason) from exc
        yield destination


__all__ = ["DEFAULT_CLONE_DEPTH", "build_clone_command", "prepare_path"]
