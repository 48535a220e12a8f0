# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Collect option records from every Nix file under a directory."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from functools import partial
from pathlib import Path
from threading import Lock

from .config import CollectionConfig
from .discovery.filesystem import FilesystemDiscovery, SourceFile
from .errors import RootNotFoundError, SourceParseError
from .extraction.walker import walk_options
from .models import OptionRecord
from .syntax.nodes import parse_source

LOGGER = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class ProgressCounter:
    """Thread-safe count of processed files.

    Each increment reports ``(completed, total)`` to the optional callback
    while holding the lock, so observers see a monotonic sequence.
    """

    def __init__(self, total: int, callback: ProgressCallback | None = None) -> None:
        self._total = total
        self._callback = callback
        self._completed = 0
        self._lock = Lock()

    def increment(self) -> int:
        with self._lock:
            self._completed += 1
            if self._callback is not None:
                self._callback(self._completed, self._total)
            return self._completed


def process_file(source: SourceFile, replacements: Mapping[str, str]) -> list[OptionRecord]:
    """Return the option records declared in one source file.

    Unreadable or unparsable files are logged and contribute no records.

    Args:
        source: File to read, with its root-relative display path.
        replacements: Substitution table for ``${name}`` placeholders.

    Returns:
        list[OptionRecord]: Records declared in the file, one per resolved name.
    """

    try:
        text = source.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.error("Error reading file %s: %s", source.path, exc)
        return []
    try:
        parsed = parse_source(text, origin=source.relative)
    except SourceParseError as exc:
        LOGGER.error("Error parsing file %s: %s", source.path, exc)
        return []
    if parsed.has_errors:
        LOGGER.warning("%s contains syntax errors; extracted options may be incomplete", source.relative)
    records = walk_options(parsed.root, source.relative, replacements)
    LOGGER.debug("%s: %d option(s)", source.relative, len(records))
    return records


def deduplicate(batches: Iterable[Sequence[OptionRecord]]) -> list[OptionRecord]:
    """Merge per-file record lists keeping the first record seen for each name."""

    merged: dict[str, OptionRecord] = {}
    for batch in batches:
        for record in batch:
            if record.name in merged:
                LOGGER.debug(
                    "%r from %s:%d shadowed by %s:%d",
                    record.name,
                    record.source_file,
                    record.source_line,
                    merged[record.name].source_file,
                    merged[record.name].source_line,
                )
                continue
            merged[record.name] = record
    return list(merged.values())


def collect_options(
    root: Path | str,
    config: CollectionConfig | None = None,
    *,
    progress: ProgressCallback | None = None,
) -> list[OptionRecord]:
    """Return every option declared under ``root``.

    Files are processed in sorted path order (in parallel when
    ``config.jobs > 1``) and merged so that each option name appears once:
    the declaration from the earliest file wins.

    Args:
        root: Directory to scan.
        config: Collection settings; defaults are used when omitted.
        progress: Optional ``(completed, total)`` callback invoked after each file.

    Returns:
        list[OptionRecord]: Unique records in file order, then declaration order.

    Raises:
        RootNotFoundError: If ``root`` does not exist or is not a directory.
    """

    settings = config or CollectionConfig()
    base = Path(root)
    if not base.is_dir():
        raise RootNotFoundError(base)

    sources = FilesystemDiscovery().discover(settings, base)
    counter = ProgressCounter(len(sources), progress)
    runner = partial(_process_and_count, replacements=dict(settings.replacements), counter=counter)

    if settings.jobs > 1 and len(sources) > 1:
        batches = _execute_in_parallel(runner, sources, settings.jobs)
    else:
        batches = [runner(source) for source in sources]

    records = deduplicate(batches)
    LOGGER.debug("collected %d unique option(s) from %d file(s)", len(records), len(sources))
    return records


def _process_and_count(
    source: SourceFile, *, replacements: Mapping[str, str], counter: ProgressCounter
) -> list[OptionRecord]:
    try:
        return process_file(source, replacements)
    finally:
        counter.increment()


def _execute_in_parallel(
    runner: Callable[[SourceFile], list[OptionRecord]],
    sources: Sequence[SourceFile],
    jobs: int,
) -> list[list[OptionRecord]]:
    """Run ``runner`` over ``sources`` concurrently, returning results in input order."""

    with ThreadPoolExecutor(max_workers=jobs) as executor:
        future_map = {executor.submit(runner, source): index for index, source in enumerate(sources)}
        batches: list[list[OptionRecord]] = [[] for _ in sources]
        for future in as_completed(future_map):
            batches[future_map[future]] = future.result()
    return batches


__all__ = ["ProgressCallback", "ProgressCounter", "collect_options", "deduplicate", "process_file"]
