# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filtering and rewriting stages applied to collected option records."""

from __future__ import annotations

from collections.abc import Sequence

from .config import FilterConfig, OutputConfig
from .extraction.paths import SEGMENT_SEPARATOR
from .models import OptionRecord


def filter_by_prefix(records: Sequence[OptionRecord], prefix: str) -> list[OptionRecord]:
    return [record for record in records if record.name.startswith(prefix)]


def filter_by_type(records: Sequence[OptionRecord], needle: str) -> list[OptionRecord]:
    """Keep records whose type display contains ``needle`` (case-insensitive)."""

    lowered = needle.lower()
    return [record for record in records if lowered in record.type_display.lower()]


def search(records: Sequence[OptionRecord], query: str) -> list[OptionRecord]:
    """Keep records whose name or description contains ``query`` (case-insensitive)."""

    lowered = query.lower()
    return [
        record
        for record in records
        if lowered in record.name.lower() or (record.description is not None and lowered in record.description.lower())
    ]


def strip_name_prefix(records: Sequence[OptionRecord], prefix: str) -> list[OptionRecord]:
    """Remove ``prefix.`` from the start of each record name.

    Records whose name does not begin with ``prefix.`` are returned unchanged.
    """

    leading = prefix.rstrip(SEGMENT_SEPARATOR) + SEGMENT_SEPARATOR
    return [
        record.model_copy(update={"name": record.name[len(leading) :]}) if record.name.startswith(leading) else record
        for record in records
    ]


def prefix_source_paths(records: Sequence[OptionRecord], base: str) -> list[OptionRecord]:
    """Prepend ``base`` to every record's source file, separated by exactly one ``/``."""

    head = base.rstrip("/")
    return [
        record.model_copy(update={"source_file": f"{head}/{record.source_file.lstrip('/')}"}) for record in records
    ]


def sort_by_name(records: Sequence[OptionRecord]) -> list[OptionRecord]:
    return sorted(records, key=lambda record: record.name)


def apply_filters(records: Sequence[OptionRecord], filters: FilterConfig) -> list[OptionRecord]:
    """Apply the configured record filters in their fixed order.

    Args:
        records: Collected records.
        filters: Prefix, type, search and presence filters.

    Returns:
        list[OptionRecord]: Records that pass every enabled filter.
    """

    selected = list(records)
    if filters.prefix:
        selected = filter_by_prefix(selected, filters.prefix)
    if filters.type_filter:
        selected = filter_by_type(selected, filters.type_filter)
    if filters.search:
        selected = search(selected, filters.search)
    if filters.has_default:
        selected = [record for record in selected if record.default_value is not None]
    if filters.has_description:
        selected = [record for record in selected if record.description is not None]
    return selected


def apply_output_rewrites(records: Sequence[OptionRecord], output: OutputConfig) -> list[OptionRecord]:
    """Apply name stripping, path prefixing and sorting from ``output``."""

    rewritten = list(records)
    if output.strip_prefix:
        rewritten = strip_name_prefix(rewritten, output.strip_prefix)
    if output.path_prefix:
        rewritten = prefix_source_paths(rewritten, output.path_prefix)
    if output.sort:
        rewritten = sort_by_name(rewritten)
    return rewritten


def postprocess(records: Sequence[OptionRecord], filters: FilterConfig, output: OutputConfig) -> list[OptionRecord]:
    """Run every post-processing stage over ``records``."""

    return apply_output_rewrites(apply_filters(records, filters), output)


__all__ = [
    "apply_filters",
    "apply_output_rewrites",
    "filter_by_prefix",
    "filter_by_type",
    "postprocess",
    "prefix_source_paths",
    "search",
    "sort_by_name",
    "strip_name_prefix",
]
