# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve attribute paths into dotted option names."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Final

from ..syntax.nodes import PathSegment

SEGMENT_SEPARATOR: Final[str] = "."


def resolve_segment(segment: PathSegment, replacements: Mapping[str, str]) -> str:
    """Return the text contributed by ``segment`` to an option name.

    Args:
        segment: Literal identifier or ``${...}`` placeholder.
        replacements: Substitution table for placeholder names.

    Returns:
        str: Substituted value, or the segment text when no substitution applies.
    """

    if segment.placeholder is None:
        return segment.text
    return replacements.get(segment.placeholder, segment.text)


def resolve_attrpath(segments: Iterable[PathSegment], replacements: Mapping[str, str]) -> str:
    """Join ``segments`` into a dotted name, substituting placeholders.

    Unknown placeholders stay as ``${name}`` in the result.
    """

    return SEGMENT_SEPARATOR.join(resolve_segment(segment, replacements) for segment in segments)


def join_prefix(prefix: str, name: str) -> str:
    """Append ``name`` to ``prefix`` using the option separator."""

    return name if not prefix else f"{prefix}{SEGMENT_SEPARATOR}{name}"


__all__ = ["SEGMENT_SEPARATOR", "join_prefix", "resolve_attrpath", "resolve_segment"]
