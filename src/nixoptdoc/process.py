# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run external programs with a resolved executable path."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path


def resolve_executable(name: str) -> str:
    """Return the absolute path of executable ``name``.

    Raises:
        FileNotFoundError: If ``name`` is neither absolute nor found on ``PATH``.
    """

    if Path(name).is_absolute():
        return name
    resolved = shutil.which(name)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{name}' was not found on PATH")
    return resolved


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run ``args`` capturing text output, raising on a non-zero exit.

    Args:
        args: Command line; the first element is resolved on ``PATH``.
        cwd: Working directory for the child process.
        env: Environment replacing the inherited one when given.

    Returns:
        subprocess.CompletedProcess[str]: Finished process with captured output.

    Raises:
        ValueError: If ``args`` is empty.
        FileNotFoundError: If the executable cannot be found.
        subprocess.CalledProcessError: If the process exits non-zero.
    """

    if not args:
        raise ValueError("subprocess command requires at least one argument")
    head, *rest = args
    return subprocess.run(
        [resolve_executable(head), *rest],
        cwd=str(cwd) if cwd is not None else None,
        env=dict(env) if env is not None else None,
        check=True,
        capture_output=True,
        text=True,
    )


__all__ = ["resolve_executable", "run_command"]
