# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for collection, filtering and output."""

from __future__ import annotations

import math
import os
from enum import Enum
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import ConfigError

DEFAULT_EXTENSION: Final[str] = "nix"
STDOUT_TARGET: Final[str] = "stdout"


def default_parallel_jobs() -> int:
    """Return 75% of available CPU cores (minimum of 1)."""
    cores = os.cpu_count() or 1
    proposed = max(1, math.floor(cores * 0.75))
    return proposed


class OutputFormat(str, Enum):
    """Enumerate the supported documentation formats."""

    MARKDOWN = "markdown"
    JSON = "json"
    HTML = "html"
    CSV = "csv"


class CollectionConfig(BaseModel):
    """Settings consumed while discovering files and extracting options."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    replacements: dict[str, str] = Field(default_factory=dict)
    excludes: list[Path] = Field(default_factory=list)
    follow_symlinks: bool = True
    extension: str = DEFAULT_EXTENSION
    jobs: int = Field(default_factory=default_parallel_jobs, ge=1)
    show_progress: bool = False

    @field_validator("extension")
    @classmethod
    def _strip_leading_dot(cls, value: str) -> str:
        extension = value.lstrip(".")
        if not extension:
            raise ValueError("extension must not be empty")
        return extension


class FilterConfig(BaseModel):
    """Record filters applied after collection."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    prefix: str | None = None
    type_filter: str | None = None
    search: str | None = None
    has_default: bool = False
    has_description: bool = False


class OutputConfig(BaseModel):
    """Settings controlling how records are rewritten and rendered."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    format: OutputFormat = OutputFormat.MARKDOWN
    out: str = STDOUT_TARGET
    sort: bool = False
    strip_prefix: str | None = None
    path_prefix: str | None = None
    emoji: bool = True

    @property
    def writes_to_stdout(self) -> bool:
        return self.out == STDOUT_TARGET


class Config(BaseModel):
    """Top-level configuration for a documentation run."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    collect: CollectionConfig = Field(default_factory=CollectionConfig)
    filter: FilterConfig = Field(default_factory=FilterConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


__all__ = [
    "CollectionConfig",
    "Config",
    "ConfigError",
    "DEFAULT_EXTENSION",
    "FilterConfig",
    "OutputConfig",
    "OutputFormat",
    "STDOUT_TARGET",
    "default_parallel_jobs",
]
