# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for Nix source discovery."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from nixoptdoc.config import CollectionConfig
from nixoptdoc.discovery.filesystem import FilesystemDiscovery


def _relative(config: CollectionConfig, root: Path) -> list[str]:
    return [source.relative for source in FilesystemDiscovery().discover(config, root)]


def test_discovers_sorted_nix_files(tmp_path: Path) -> None:
    for name in ("b.nix", "a.nix", "sub/c.nix", "readme.md", "sub/d.nix.bak"):
        target = tmp_path / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("{ }", encoding="utf-8")
    assert _relative(CollectionConfig(), tmp_path) == ["a.nix", "b.nix", "sub/c.nix"]


def test_hidden_entries_are_skipped(tmp_path: Path) -> None:
    (tmp_path / ".hidden").mkdir()
    (tmp_path / ".hidden" / "inside.nix").write_text("{ }", encoding="utf-8")
    (tmp_path / ".dotfile.nix").write_text("{ }", encoding="utf-8")
    (tmp_path / "visible.nix").write_text("{ }", encoding="utf-8")
    assert _relative(CollectionConfig(), tmp_path) == ["visible.nix"]


def test_hidden_root_is_still_scanned(tmp_path: Path) -> None:
    root = tmp_path / ".config"
    root.mkdir()
    (root / "module.nix").write_text("{ }", encoding="utf-8")
    assert _relative(CollectionConfig(), root) == ["module.nix"]


def test_relative_and_absolute_excludes(tmp_path: Path) -> None:
    for name in ("keep/a.nix", "skip/b.nix", "other/c.nix", "skipper/d.nix"):
        target = tmp_path / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("{ }", encoding="utf-8")
    config = CollectionConfig(excludes=[Path("skip"), tmp_path / "other"])
    assert _relative(config, tmp_path) == ["keep/a.nix", "skipper/d.nix"]


def test_custom_extension(tmp_path: Path) -> None:
    (tmp_path / "a.nix").write_text("{ }", encoding="utf-8")
    (tmp_path / "b.nixmod").write_text("{ }", encoding="utf-8")
    assert _relative(CollectionConfig(extension=".nixmod"), tmp_path) == ["b.nixmod"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlinked_directories_follow_configuration(tmp_path: Path) -> None:
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "linked.nix").write_text("{ }", encoding="utf-8")
    root = tmp_path / "root"
    root.mkdir()
    (root / "local.nix").write_text("{ }", encoding="utf-8")
    (root / "link").symlink_to(outside, target_is_directory=True)

    assert _relative(CollectionConfig(), root) == ["link/linked.nix", "local.nix"]
    assert _relative(CollectionConfig(follow_symlinks=False), root) == ["local.nix"]
