# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn recognised option-declaration calls into :class:`OptionRecord` values."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

from pydantic import ValidationError

from ..models import OptionRecord
from ..nix_types import BoolType, classify, unknown
from ..syntax.nodes import NodeKind, SyntaxNode
from ..text import dedent_tail, normalize_description, string_payload, unwrap_literal_expression

LOGGER = logging.getLogger(__name__)

ENABLE_OPTION_FUNCTION: Final[str] = "mkEnableOption"
OPTION_FUNCTION: Final[str] = "mkOption"
DECLARATION_FUNCTIONS: Final[frozenset[str]] = frozenset({ENABLE_OPTION_FUNCTION, OPTION_FUNCTION})

ENABLE_DEFAULT: Final[str] = "false"
ENABLE_EXAMPLE: Final[str] = "true"

_TYPE_KEY: Final[str] = "type"
_DESCRIPTION_KEY: Final[str] = "description"
_DEFAULT_KEY: Final[str] = "default"
_EXAMPLE_KEY: Final[str] = "example"


@dataclass(frozen=True, slots=True)
class ExtractionContext:
    """Per-file inputs shared by every declaration in that file.

    Attributes:
        source_file: Path of the file relative to the collection root.
        replacements: Substitution table applied to ``${name}`` placeholders.
    """

    source_file: str
    replacements: Mapping[str, str] = field(default_factory=dict)


def callee_name(call: SyntaxNode) -> str | None:
    """Return the called function name of ``call``.

    The trailing member of a select chain (``lib.options.mkOption``) wins;
    otherwise a bare identifier (``mkOption``) is used.

    Args:
        call: Node of kind :attr:`NodeKind.CALL`.

    Returns:
        str | None: Function name, or ``None`` when the callee is an arbitrary expression.
    """

    callee = call.callee
    if callee is None:
        return None
    if callee.kind is NodeKind.SELECT:
        return callee.member
    if callee.kind is NodeKind.IDENT:
        return callee.name
    return None


def literal_text(node: SyntaxNode) -> str:
    """Return the string payload carried by ``node``.

    String literals lose their delimiters. A call wrapping a string literal
    (``lib.mdDoc "..."``) yields the wrapped payload. Any other expression is
    returned as source text with surrounding quote characters trimmed.
    """

    if node.kind is NodeKind.STRING:
        return string_payload(node.text)
    if node.kind is NodeKind.CALL:
        argument = node.argument
        if argument is not None and argument.kind is NodeKind.STRING:
            return string_payload(argument.text)
    return node.text.strip("\"'")


class DeclarationExtractor:
    """Build option records from ``mkEnableOption`` and ``mkOption`` calls."""

    def __init__(self, context: ExtractionContext) -> None:
        self._context = context

    @property
    def context(self) -> ExtractionContext:
        return self._context

    def extract(self, call: SyntaxNode, function: str, name: str) -> OptionRecord | None:
        """Return the record declared by ``call`` under option ``name``.

        Args:
            call: Declaration call node.
            function: Resolved callee name, one of :data:`DECLARATION_FUNCTIONS`.
            name: Fully resolved dotted option name.

        Returns:
            OptionRecord | None: Complete record, or ``None`` when no valid
            record can be built (for example an empty option name).
        """

        try:
            if function == ENABLE_OPTION_FUNCTION:
                return self._enable_option(call, name)
            if function == OPTION_FUNCTION:
                return self._option(call, name)
        except ValidationError as exc:
            LOGGER.debug(
                "discarding declaration %r at %s:%d: %s",
                name,
                self._context.source_file,
                call.line,
                exc.errors()[0]["msg"] if exc.errors() else exc,
            )
            return None
        LOGGER.debug("not a recognised option function: %s", function)
        return None

    def _enable_option(self, call: SyntaxNode, name: str) -> OptionRecord:
        argument = call.argument
        literal = argument.find_first(NodeKind.STRING) if argument is not None else None
        description = (
            normalize_description(string_payload(literal.text), self._context.replacements)
            if literal is not None
            else None
        )
        return OptionRecord(
            name=name,
            description=description,
            type_kind=BoolType(),
            default_value=ENABLE_DEFAULT,
            example=ENABLE_EXAMPLE,
            source_file=self._context.source_file,
            source_line=call.line,
        )

    def _option(self, call: SyntaxNode, name: str) -> OptionRecord:
        type_kind = unknown()
        description: str | None = None
        default_value: str | None = None
        example: str | None = None

        argument = call.argument
        if argument is not None and argument.kind is NodeKind.ATTR_SET:
            for key, value in self._direct_attributes(argument):
                if key == _TYPE_KEY:
                    type_kind = classify(dedent_tail(value.text))
                elif key == _DESCRIPTION_KEY:
                    description = normalize_description(literal_text(value), self._context.replacements)
                elif key == _DEFAULT_KEY:
                    default_value = dedent_tail(unwrap_literal_expression(value.text))
                elif key == _EXAMPLE_KEY:
                    example = dedent_tail(unwrap_literal_expression(value.text))
        elif argument is not None:
            LOGGER.debug("%s argument for %r is not an attribute set", OPTION_FUNCTION, name)

        return OptionRecord(
            name=name,
            description=description,
            type_kind=type_kind,
            default_value=default_value,
            example=example,
            source_file=self._context.source_file,
            source_line=call.line,
        )

    @staticmethod
    def _direct_attributes(attrset: SyntaxNode) -> list[tuple[str, SyntaxNode]]:
        """Return ``(key, value)`` pairs for single-segment keys of ``attrset``."""

        pairs: list[tuple[str, SyntaxNode]] = []
        for binding in attrset.bindings:
            path, value = binding.path, binding.value
            if path is None or value is None:
                continue
            segments = path.segments
            if len(segments) != 1 or segments[0].is_interpolation:
                continue
            pairs.append((segments[0].text, value))
        return pairs


__all__ = [
    "DECLARATION_FUNCTIONS",
    "DeclarationExtractor",
    "ENABLE_OPTION_FUNCTION",
    "ExtractionContext",
    "OPTION_FUNCTION",
    "callee_name",
    "literal_text",
]
