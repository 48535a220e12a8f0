# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tree-sitter backed syntax tree access for Nix sources."""

from .grammar import build_nix_parser, load_nix_language
from .nodes import NodeKind, ParsedSource, PathSegment, SourceText, SyntaxNode, parse_source

__all__ = [
    "NodeKind",
    "ParsedSource",
    "PathSegment",
    "SourceText",
    "SyntaxNode",
    "build_nix_parser",
    "load_nix_language",
    "parse_source",
]
