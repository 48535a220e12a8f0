# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CSV rendering of option records."""

from __future__ import annotations

import csv
import io
from collections.abc import Sequence
from typing import Final

from ..models import OptionRecord
from .common import MISSING_VALUE

CSV_HEADER: Final[tuple[str, ...]] = (
    "Option",
    "Type",
    "Default",
    "Example",
    "Description",
    "FilePath",
    "LineNumber",
)


def _flatten(description: str | None) -> str:
    if description is None:
        return MISSING_VALUE
    return description.replace("\n", " ").replace("\r", "")


def render_csv(records: Sequence[OptionRecord]) -> str:
    """Render ``records`` as CSV with one row per option.

    Missing values are written as ``-``; descriptions are flattened onto a
    single line.
    """

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for record in records:
        writer.writerow(
            (
                record.name,
                record.type_display,
                record.default_value if record.default_value is not None else MISSING_VALUE,
                record.example if record.example is not None else MISSING_VALUE,
                _flatten(record.description),
                record.source_file,
                record.source_line,
            )
        )
    return buffer.getvalue()


__all__ = ["CSV_HEADER", "render_csv"]
