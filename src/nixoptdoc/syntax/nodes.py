# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Kind-tagged view over Tree-sitter Nix syntax nodes.

The extraction code never looks at grammar node names directly. It sees a
:class:`SyntaxNode` whose :attr:`~SyntaxNode.kind` is one of the few
constructs it understands, with typed accessors for the parts it needs
(assignment path and value, call callee and argument, and so on). Anything
else is :attr:`NodeKind.OTHER` and is only ever traversed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from tree_sitter import Node as TSNode
from tree_sitter import Tree as TSTree

from ..errors import SourceParseError
from .grammar import build_nix_parser


class NodeKind(str, Enum):
    """Node categories recognised by the option walker."""

    ATTR_SET = "attr_set"
    ASSIGNMENT = "assignment"
    ATTR_PATH = "attr_path"
    CALL = "call"
    SELECT = "select"
    IDENT = "ident"
    STRING = "string"
    SCOPED = "scoped"
    OTHER = "other"


_KIND_BY_TYPE: Final[dict[str, NodeKind]] = {
    "attrset_expression": NodeKind.ATTR_SET,
    "rec_attrset_expression": NodeKind.ATTR_SET,
    "binding": NodeKind.ASSIGNMENT,
    "attrpath": NodeKind.ATTR_PATH,
    "apply_expression": NodeKind.CALL,
    "select_expression": NodeKind.SELECT,
    "variable_expression": NodeKind.IDENT,
    "identifier": NodeKind.IDENT,
    "string_expression": NodeKind.STRING,
    "indented_string_expression": NodeKind.STRING,
    "with_expression": NodeKind.SCOPED,
}

_INTERPOLATION_TYPE: Final[str] = "interpolation"
_STRING_ATTR_TYPE: Final[str] = "string_expression"
_BINDING_SET_TYPE: Final[str] = "binding_set"
_COMMENT_TYPE: Final[str] = "comment"
_NEWLINE: Final[bytes] = b"\n"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One component of an attribute path.

    Attributes:
        text: Source text of the segment (``foo``, ``"foo"`` or ``${foo}``).
        placeholder: Inner name when the segment is a ``${...}`` interpolation.
    """

    text: str
    placeholder: str | None = None

    @property
    def is_interpolation(self) -> bool:
        return self.placeholder is not None


@dataclass(frozen=True, slots=True)
class SourceText:
    """Source bytes shared by every node of one parsed file."""

    data: bytes

    def slice(self, start: int, end: int) -> str:
        return self.data[start:end].decode("utf-8", errors="replace")

    def line_of(self, offset: int) -> int:
        """Return the 1-based line containing byte ``offset``."""

        return self.data.count(_NEWLINE, 0, offset) + 1


@dataclass(frozen=True, slots=True)
class SyntaxNode:
    """Tree-sitter node paired with the source it was parsed from."""

    node: TSNode
    source: SourceText

    @property
    def kind(self) -> NodeKind:
        return _KIND_BY_TYPE.get(self.node.type, NodeKind.OTHER)

    @property
    def grammar_type(self) -> str:
        return self.node.type

    @property
    def text(self) -> str:
        return self.source.slice(self.node.start_byte, self.node.end_byte)

    @property
    def line(self) -> int:
        """Return the 1-based line on which this node starts."""

        return self.source.line_of(self.node.start_byte)

    @property
    def children(self) -> tuple[SyntaxNode, ...]:
        """Return the named children in source order."""

        return tuple(self._wrap(child) for child in self.node.named_children)

    def field(self, name: str) -> SyntaxNode | None:
        """Return the child stored under grammar field ``name``, if any."""

        child = self.node.child_by_field_name(name)
        return self._wrap(child) if child is not None else None

    def find_first(self, kind: NodeKind) -> SyntaxNode | None:
        """Return the first node of ``kind`` in this subtree, depth-first."""

        if self.kind is kind:
            return self
        for child in self.children:
            found = child.find_first(kind)
            if found is not None:
                return found
        return None

    # Attribute set: ``{ a = 1; b = 2; }``
    @property
    def bindings(self) -> tuple[SyntaxNode, ...]:
        """Return the assignments declared directly inside an attribute set."""

        found: list[SyntaxNode] = []
        for child in self.children:
            if child.kind is NodeKind.ASSIGNMENT:
                found.append(child)
            elif child.grammar_type == _BINDING_SET_TYPE:
                found.extend(entry for entry in child.children if entry.kind is NodeKind.ASSIGNMENT)
        return tuple(found)

    # Assignment: ``path = value;``
    @property
    def path(self) -> SyntaxNode | None:
        return self.field("attrpath")

    @property
    def value(self) -> SyntaxNode | None:
        return self.field("expression")

    # Attribute path
    @property
    def segments(self) -> tuple[PathSegment, ...]:
        """Return the ordered segments of an attribute-path node."""

        segments: list[PathSegment] = []
        for child in self.node.named_children:
            text = self.source.slice(child.start_byte, child.end_byte)
            if child.type == _INTERPOLATION_TYPE:
                inner = child.child_by_field_name("expression")
                name = self.source.slice(inner.start_byte, inner.end_byte) if inner is not None else text[2:-1]
                segments.append(PathSegment(text=text, placeholder=name.strip()))
            elif child.type == _STRING_ATTR_TYPE:
                segments.append(PathSegment(text=text.strip('"')))
            elif child.type != _COMMENT_TYPE:
                segments.append(PathSegment(text=text))
        return tuple(segments)

    # Call: ``callee argument``
    @property
    def callee(self) -> SyntaxNode | None:
        return self.field("function")

    @property
    def argument(self) -> SyntaxNode | None:
        return self.field("argument")

    # Member select: ``base.member``
    @property
    def base(self) -> SyntaxNode | None:
        return self.field("expression")

    @property
    def member(self) -> str | None:
        """Return the trailing attribute name of a member-select chain."""

        attrpath = self.node.child_by_field_name("attrpath")
        if attrpath is None or not attrpath.named_children:
            return None
        last = attrpath.named_children[-1]
        return self.source.slice(last.start_byte, last.end_byte)

    # Identifier
    @property
    def name(self) -> str:
        name_node = self.node.child_by_field_name("name")
        if name_node is None:
            return self.text
        return self.source.slice(name_node.start_byte, name_node.end_byte)

    # Scoped expression: ``with bound; body``
    @property
    def bound(self) -> SyntaxNode | None:
        return self.field("environment")

    @property
    def body(self) -> SyntaxNode | None:
        return self.field("body")

    def _wrap(self, node: TSNode) -> SyntaxNode:
        return SyntaxNode(node=node, source=self.source)


@dataclass(frozen=True, slots=True)
class ParsedSource:
    """A parsed Nix file: the tree plus its root node view."""

    tree: TSTree
    root: SyntaxNode

    @property
    def has_errors(self) -> bool:
        return bool(self.tree.root_node.has_error)


def parse_source(text: str, *, origin: str = "<string>") -> ParsedSource:
    """Parse Nix ``text`` into a :class:`ParsedSource`.

    Syntax errors do not raise: Tree-sitter recovers and the resulting tree is
    still walkable, with :attr:`ParsedSource.has_errors` set.

    Args:
        text: Nix source code.
        origin: Label used in error messages, usually the file path.

    Returns:
        ParsedSource: Tree and root node for ``text``.

    Raises:
        SourceParseError: If the source cannot be encoded or the parser fails.
    """

    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise SourceParseError(origin, str(exc)) from exc
    parser = build_nix_parser()
    try:
        tree = parser.parse(data)
    except (ValueError, RuntimeError) as exc:
        raise SourceParseError(origin, str(exc)) from exc
    if tree is None:
        raise SourceParseError(origin, "parser returned no tree")
    return ParsedSource(tree=tree, root=SyntaxNode(node=tree.root_node, source=SourceText(data)))


__all__ = ["NodeKind", "ParsedSource", "PathSegment", "SourceText", "SyntaxNode", "parse_source"]
