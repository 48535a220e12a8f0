# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Recursive option walker over a parsed Nix syntax tree."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Final

from ..models import OptionRecord
from ..syntax.nodes import NodeKind, SyntaxNode
from .declarations import DECLARATION_FUNCTIONS, DeclarationExtractor, ExtractionContext, callee_name
from .paths import join_prefix, resolve_attrpath

LOGGER = logging.getLogger(__name__)

_Sink = dict[str, OptionRecord]

_VALUE_KINDS: Final[frozenset[NodeKind]] = frozenset({NodeKind.ATTR_SET, NodeKind.CALL, NodeKind.SCOPED})


class OptionWalker:
    """Collect option declarations from one file's syntax tree.

    Assignments extend the dotted prefix with their resolved attribute path.
    Attribute sets, ``with`` bodies and every other construct are traversed
    without growing the prefix. Records sharing a name within one walk
    collapse to the last one declared.
    """

    def __init__(self, source_file: str, replacements: Mapping[str, str] | None = None) -> None:
        self._replacements: Mapping[str, str] = dict(replacements or {})
        self._extractor = DeclarationExtractor(
            ExtractionContext(source_file=source_file, replacements=self._replacements)
        )

    @property
    def source_file(self) -> str:
        return self._extractor.context.source_file

    def visit(self, node: SyntaxNode, prefix: str = "") -> list[OptionRecord]:
        """Return every option declared in the subtree rooted at ``node``.

        Args:
            node: Subtree root, usually the file's root node.
            prefix: Dotted name of the enclosing attribute path.

        Returns:
            list[OptionRecord]: Records in declaration order, one per resolved name.
        """

        sink: _Sink = {}
        self._visit(node, prefix, sink)
        return list(sink.values())

    def _visit(self, node: SyntaxNode, prefix: str, sink: _Sink) -> None:
        if node.kind is NodeKind.ASSIGNMENT:
            path, value = node.path, node.value
            if path is None or value is None:
                LOGGER.debug("incomplete assignment at %s:%d", self.source_file, node.line)
                return
            name = join_prefix(prefix, resolve_attrpath(path.segments, self._replacements))
            self._parse_value(value, name, sink)
            return
        for child in node.children:
            self._visit(child, prefix, sink)

    def _parse_value(self, node: SyntaxNode, prefix: str, sink: _Sink) -> None:
        kind = node.kind
        if kind is NodeKind.ATTR_SET:
            for child in node.children:
                self._visit(child, prefix, sink)
        elif kind is NodeKind.CALL:
            self._parse_call(node, prefix, sink)
        elif kind is NodeKind.SCOPED:
            body = node.body
            if body is None:
                return
            if body.kind in _VALUE_KINDS:
                self._parse_value(body, prefix, sink)
            else:
                self._visit(body, prefix, sink)
        else:
            LOGGER.debug(
                "skipping %s value for %r at %s:%d", node.grammar_type, prefix, self.source_file, node.line
            )

    def _parse_call(self, node: SyntaxNode, name: str, sink: _Sink) -> None:
        function = callee_name(node)
        if function not in DECLARATION_FUNCTIONS:
            LOGGER.debug("ignoring call to %s for %r at %s:%d", function, name, self.source_file, node.line)
            return
        record = self._extractor.extract(node, function, name)
        if record is None:
            return
        if sink.pop(record.name, None) is not None:
            LOGGER.debug("%s redeclares %r; keeping the later declaration", self.source_file, record.name)
        sink[record.name] = record


def walk_options(
    root: SyntaxNode, source_file: str, replacements: Mapping[str, str] | None = None
) -> list[OptionRecord]:
    """Return the options declared in the tree rooted at ``root``."""

    return OptionWalker(source_file, replacements).visit(root)


__all__ = ["OptionWalker", "walk_options"]
