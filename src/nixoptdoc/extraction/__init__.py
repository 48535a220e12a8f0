# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option extraction from parsed Nix syntax trees."""

from .declarations import DeclarationExtractor, ExtractionContext, callee_name
from .paths import join_prefix, resolve_attrpath, resolve_segment
from .walker import OptionWalker, walk_options

__all__ = [
    "DeclarationExtractor",
    "ExtractionContext",
    "OptionWalker",
    "callee_name",
    "join_prefix",
    "resolve_attrpath",
    "resolve_segment",
    "walk_options",
]
