# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Normalisation helpers for description, default and example text.

Descriptions pass through :func:`normalize_description` (substitution,
dedent, directive stripping, admonition conversion). Defaults and examples
pass through :func:`unwrap_literal_expression` and :func:`dedent_tail`. All
helpers are pure and total: malformed input degrades to the unchanged text.
"""

from __future__ import annotations

import re
import textwrap
from collections.abc import Mapping
from typing import Final

PLACEHOLDER_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$\{([^}]+)\}")
DIRECTIVE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\{[a-z]+\}(`[^`]+`)")
ADMONITION_PATTERN: Final[re.Pattern[str]] = re.compile(r":::\s*\{\.([A-Za-z]+)\}([\s\S]*?):::")
LITERAL_WRAPPER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:[A-Za-z_][\w'-]*\.)*(?:literalExpression|literalExample|literalMD)\b"
)

ADMONITION_KINDS: Final[frozenset[str]] = frozenset({"note", "tip", "important", "warning", "caution"})
DEFAULT_ADMONITION: Final[str] = "NOTE"
INDENTED_STRING_DELIMITER: Final[str] = "''"
STRING_DELIMITER: Final[str] = '"'


def apply_replacements(text: str, replacements: Mapping[str, str]) -> str:
    """Substitute ``${name}`` placeholders in ``text`` from ``replacements``.

    Placeholders whose name is absent from the table are left verbatim so the
    gap stays visible in generated documentation.

    Args:
        text: Text that may contain ``${name}`` placeholders.
        replacements: Mapping of placeholder names to substitution values.

    Returns:
        str: Text with every known placeholder replaced.
    """

    if not replacements:
        return text

    def _substitute(match: re.Match[str]) -> str:
        return replacements.get(match.group(1), match.group(0))

    return PLACEHOLDER_PATTERN.sub(_substitute, text)


def dedent_tail(text: str) -> str:
    """Remove common indentation from every line except the first.

    The first line is kept exactly; the remaining lines lose the longest
    whitespace prefix shared by all of their non-blank members, and
    whitespace-only lines become empty.

    Args:
        text: Possibly multi-line text.

    Returns:
        str: Text with the tail dedented.
    """

    head, newline, rest = text.partition("\n")
    if not newline:
        return text
    return head + textwrap.dedent(newline + rest)


def strip_directives(text: str) -> str:
    """Collapse ``{role}`code``` spans into the bare code span."""

    return DIRECTIVE_PATTERN.sub(r"\1", text)


def convert_admonitions(text: str) -> str:
    """Convert ``:::{.kind} ... :::`` blocks into GitHub-style callouts.

    Args:
        text: Description text possibly containing fenced admonitions.

    Returns:
        str: Text where each admonition is a ``> [!KIND]`` quote block.
    """

    def _callout(match: re.Match[str]) -> str:
        kind = match.group(1).lower()
        label = kind.upper() if kind in ADMONITION_KINDS else DEFAULT_ADMONITION
        content = match.group(2).strip()
        return f"> [!{label}]  \n> " + content.replace("\n", "\n> ")

    return ADMONITION_PATTERN.sub(_callout, text)


def clean_description(text: str) -> str:
    """Strip inline directives from ``text`` and convert its admonitions."""

    return convert_admonitions(strip_directives(text))


def normalize_description(text: str, replacements: Mapping[str, str]) -> str:
    """Apply the full description pipeline to ``text``.

    Args:
        text: Raw description payload with string delimiters removed.
        replacements: Substitution table for ``${name}`` placeholders.

    Returns:
        str: Normalised description. Applying the function twice yields the
        same result as applying it once.
    """

    return clean_description(dedent_tail(apply_replacements(text, replacements)))


def unwrap_literal_expression(value: str) -> str:
    """Return the payload of a ``literalExpression`` wrapper, if present.

    The payload is everything between the first and the last ``''``; when the
    value has no indented-string delimiter the first and last double quotes are
    used instead. Delimiters repeated inside the payload are not interpreted.

    Args:
        value: Raw source text of a ``default`` or ``example`` attribute.

    Returns:
        str: Trimmed payload, or the trimmed input when no wrapper is recognised.
    """

    stripped = value.strip()
    if not LITERAL_WRAPPER_PATTERN.match(stripped):
        return stripped
    for delimiter in (INDENTED_STRING_DELIMITER, STRING_DELIMITER):
        start = stripped.find(delimiter)
        if start < 0:
            continue
        start += len(delimiter)
        end = stripped.rfind(delimiter)
        if end > start:
            return stripped[start:end].strip()
        return stripped
    return stripped


def string_payload(literal: str) -> str:
    """Return ``literal`` without its surrounding Nix string delimiters."""

    if (
        len(literal) >= 2 * len(INDENTED_STRING_DELIMITER)
        and literal.startswith(INDENTED_STRING_DELIMITER)
        and literal.endswith(INDENTED_STRING_DELIMITER)
    ):
        return literal[len(INDENTED_STRING_DELIMITER) : -len(INDENTED_STRING_DELIMITER)]
    return literal.strip("\"'")


__all__ = [
    "ADMONITION_KINDS",
    "apply_replacements",
    "clean_description",
    "convert_admonitions",
    "dedent_tail",
    "normalize_description",
    "string_payload",
    "strip_directives",
    "unwrap_literal_expression",
]
