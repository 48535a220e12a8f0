# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the option record model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from nixoptdoc.models import OptionRecord
from nixoptdoc.nix_types import OptionType, StrType


def _record(**overrides: object) -> OptionRecord:
    values: dict[str, object] = {
        "name": "services.demo.enable",
        "type_kind": StrType(),
        "source_file": "demo.nix",
        "source_line": 1,
    }
    values.update(overrides)
    return OptionRecord.model_validate(values)


def test_document_uses_display_type() -> None:
    record = _record(type_kind=OptionType(inner=StrType()), default_value="null")
    assert record.to_document() == {
        "name": "services.demo.enable",
        "description": None,
        "type": "optional string",
        "default": "null",
        "example": None,
        "file_path": "demo.nix",
        "line_number": 1,
    }


@pytest.mark.parametrize("name", ["", "services..enable", ".leading", "trailing."])
def test_rejects_names_with_empty_segments(name: str) -> None:
    with pytest.raises(ValidationError):
        _record(name=name)


def test_rejects_non_positive_line() -> None:
    with pytest.raises(ValidationError):
        _record(source_line=0)


def test_type_kind_round_trips_through_discriminator() -> None:
    record = _record(type_kind={"kind": "option", "inner": {"kind": "bool"}})
    assert record.type_display == "optional boolean"


def test_records_are_immutable() -> None:
    record = _record()
    with pytest.raises(ValidationError):
        record.name = "other"  # type: ignore[misc]
