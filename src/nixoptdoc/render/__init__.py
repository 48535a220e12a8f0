# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Documentation renderers for collected option records."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Final

from ..config import OutputFormat
from ..errors import RenderError
from ..models import OptionRecord
from .csv import render_csv
from .html import render_html
from .json import render_json
from .markdown import render_markdown

Renderer = Callable[[Sequence[OptionRecord]], str]

RENDERERS: Final[dict[OutputFormat, Renderer]] = {
    OutputFormat.MARKDOWN: render_markdown,
    OutputFormat.JSON: render_json,
    OutputFormat.HTML: render_html,
    OutputFormat.CSV: render_csv,
}


def render(records: Sequence[OptionRecord], output_format: OutputFormat | str) -> str:
    """Render ``records`` in ``output_format``.

    Args:
        records: Records in output order.
        output_format: Target format or its name.

    Returns:
        str: Rendered document.

    Raises:
        RenderError: If the format is unknown or rendering fails.
    """

    try:
        fmt = OutputFormat(output_format)
    except ValueError as exc:
        raise RenderError(f"Unsupported output format: {output_format}") from exc
    renderer = RENDERERS[fmt]
    try:
        return renderer(records)
    except (TypeError, ValueError) as exc:
        raise RenderError(f"Failed to render {fmt.value} output: {exc}") from exc


__all__ = [
    "OutputFormat",
    "RENDERERS",
    "Renderer",
    "render",
    "render_csv",
    "render_html",
    "render_json",
    "render_markdown",
]
