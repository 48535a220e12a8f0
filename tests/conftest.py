# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from nixoptdoc.models import OptionRecord
from nixoptdoc.nix_types import BoolType, StrType

NixWriter = Callable[[str, str], Path]


@pytest.fixture
def write_nix(tmp_path: Path) -> NixWriter:
    """Return a helper writing dedented Nix source below ``tmp_path``."""

    def _write(relative: str, content: str) -> Path:
        target = tmp_path / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return target

    return _write


@pytest.fixture
def sample_records() -> list[OptionRecord]:
    """Return a small record set covering optional fields."""

    return [
        OptionRecord(
            name="services.web.enable",
            description="Whether to enable the web service.",
            type_kind=BoolType(),
            default_value="false",
            example="true",
            source_file="modules/web.nix",
            source_line=4,
        ),
        OptionRecord(
            name="services.web.host",
            description=None,
            type_kind=StrType(),
            default_value='"localhost"',
            example=None,
            source_file="modules/web.nix",
            source_line=9,
        ),
    ]
