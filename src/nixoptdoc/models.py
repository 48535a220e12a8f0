# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the nixoptdoc package."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .nix_types import TypeKind


class OptionRecord(BaseModel):
    """Documentation metadata for one declared module option."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str | None = None
    type_kind: TypeKind
    default_value: str | None = None
    example: str | None = None
    source_file: str
    source_line: int = Field(ge=1)

    @field_validator("name")
    @classmethod
    def _reject_empty_segments(cls, value: str) -> str:
        """Ensure every dot-separated segment of ``value`` is non-empty."""

        if any(not segment for segment in value.split(".")):
            raise ValueError(f"option name has an empty path segment: {value!r}")
        return value

    @property
    def type_display(self) -> str:
        """Return the fixed display string for :attr:`type_kind`."""

        return str(self.type_kind)

    def to_document(self) -> dict[str, Any]:
        """Return the flat mapping consumed by the serialising renderers.

        Returns:
            dict[str, Any]: Record fields with the type rendered as its display string.
        """

        return {
            "name": self.name,
            "description": self.description,
            "type": self.type_display,
            "default": self.default_value,
            "example": self.example,
            "file_path": self.source_file,
            "line_number": self.source_line,
        }


__all__ = ["OptionRecord"]
