# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Markdown rendering of option records."""

from __future__ import annotations

from collections.abc import Sequence

from ..models import OptionRecord
from .common import DOCUMENT_TITLE, GENERATOR_NAME, GENERATOR_URL, line_anchor, needs_block


def _field(label: str, value: str, *, escape_ticks: bool = False) -> str:
    if needs_block(value):
        return f"\n**{label}:**\n\n```nix\n{value}\n```"
    inline = value.replace("`", "\\`") if escape_ticks else value
    return f"\n**{label}:** `{inline}`"


def render_option(record: OptionRecord) -> str:
    """Return the Markdown section describing ``record``."""

    lines = [f"\n## [`{record.name}`]({line_anchor(record.source_file, record.source_line)})"]
    if record.description is not None:
        lines.append(f"\n{record.description}")
    lines.append(_field("Type", record.type_display, escape_ticks=True))
    if record.default_value is not None:
        lines.append(_field("Default", record.default_value))
    if record.example is not None:
        lines.append(_field("Example", record.example))
    return "\n".join(lines) + "\n"


def render_markdown(records: Sequence[OptionRecord]) -> str:
    """Render ``records`` as a Markdown document.

    Args:
        records: Records in output order.

    Returns:
        str: Document with a title, one section per option and a footer.
    """

    parts = [f"# {DOCUMENT_TITLE}\n\n"]
    parts.extend(render_option(record) for record in records)
    parts.append(f"\n---\n*Generated with [{GENERATOR_NAME}]({GENERATOR_URL})*\n")
    return "".join(parts)


__all__ = ["render_markdown", "render_option"]
