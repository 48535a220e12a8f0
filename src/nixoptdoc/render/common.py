# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Values shared by the documentation renderers."""

from __future__ import annotations

from typing import Final

DOCUMENT_TITLE: Final[str] = "NixOS Module Options"
GENERATOR_NAME: Final[str] = "nix-options-doc"
GENERATOR_URL: Final[str] = "https://github.com/Thunderbottom/nix-options-doc"
INLINE_LIMIT: Final[int] = 72
MISSING_VALUE: Final[str] = "-"


def needs_block(value: str) -> bool:
    """Return whether ``value`` should be shown as a code block rather than inline."""

    return "\n" in value or len(value) > INLINE_LIMIT


def line_anchor(source_file: str, source_line: int) -> str:
    return f"{source_file}#L{source_line}"


__all__ = [
    "DOCUMENT_TITLE",
    "GENERATOR_NAME",
    "GENERATOR_URL",
    "INLINE_LIMIT",
    "MISSING_VALUE",
    "line_anchor",
    "needs_block",
]
