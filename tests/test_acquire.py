# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for resolving the directory to scan."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

import pytest

from nixoptdoc import acquire
from nixoptdoc.acquire import build_clone_command, prepare_path
from nixoptdoc.errors import RepositoryFetchError


def test_local_path_is_used_directly(tmp_path: Path) -> None:
    with prepare_path(tmp_path) as root:
        assert root == tmp_path
    assert tmp_path.exists()


def test_clone_command_shape(tmp_path: Path) -> None:
    command = build_clone_command("https://example.org/repo.git", tmp_path, branch="v1", depth=0)
    assert command == [
        "git",
        "clone",
        "--quiet",
        "--depth=1",
        "--branch",
        "v1",
        "--",
        "https://example.org/repo.git",
        str(tmp_path),
    ]


def test_clone_failure_raises_and_cleans_up(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[Path] = []

    def _fail(args: Sequence[str], **_: object) -> subprocess.CompletedProcess[str]:
        seen.append(Path(args[-1]))
        raise subprocess.CalledProcessError(128, list(args), stderr="fatal: repository not found\n")

    monkeypatch.setattr(acquire, "run_command", _fail)

    with pytest.raises(RepositoryFetchError, match="repository not found"):
        with prepare_path("https://example.invalid/missing.git"):
            pass
    assert seen and not seen[0].parent.exists()


def test_successful_clone_yields_checkout_and_removes_it(monkeypatch: pytest.MonkeyPatch) -> None:
    def _clone(args: Sequence[str], **_: object) -> subprocess.CompletedProcess[str]:
        destination = Path(args[-1])
        destination.mkdir()
        (destination / "module.nix").write_text("{ }", encoding="utf-8")
        return subprocess.CompletedProcess(list(args), 0, "", "")

    monkeypatch.setattr(acquire, "run_command", _clone)

    with prepare_path("https://example.org/repo.git", branch="main", depth=3) as root:
        assert (root / "module.nix").is_file()
        checkout = root
    assert not checkout.exists()
