# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the Tree-sitter grammar for Nix and build parsers from it."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from functools import lru_cache
from types import ModuleType
from typing import Final, cast

from tree_sitter import Language, Parser

from ..errors import GrammarUnavailableError

LOGGER = logging.getLogger(__name__)

GRAMMAR_NAME: Final[str] = "nix"
_GRAMMAR_MODULE: Final[str] = f"tree_sitter_{GRAMMAR_NAME}"
_LANGUAGE_PACK_MODULE: Final[str] = "tree_sitter_language_pack"
_PACK_ERROR_NAME: Final[str] = "Error"


def _import_module(module_name: str) -> ModuleType | None:
    """Import a packaged grammar provider when available."""

    try:
        return importlib.import_module(module_name)
    except ModuleNotFoundError:
        return None


def _language_from_grammar_module(module: ModuleType) -> Language | None:
    """Instantiate a ``Language`` from a standalone ``tree_sitter_<name>`` module.

    Args:
        module: Imported grammar module exposing a ``language`` factory.

    Returns:
        Language | None: Instantiated language, or ``None`` when the factory fails.
    """

    factory = getattr(module, "language", None)
    if not callable(factory):
        return None
    try:
        return Language(factory())
    except (TypeError, ValueError):
        return None


def _pack_errors(module: ModuleType) -> tuple[type[Exception], ...]:
    """Return the exception types raised by a language pack lookup.

    Newer releases fetch grammars on first use and raise their own ``Error``
    hierarchy (``DownloadError``, ``LanguageNotFoundError``) on failure.
    """

    pack_error = getattr(module, _PACK_ERROR_NAME, None)
    if isinstance(pack_error, type) and issubclass(pack_error, Exception):
        return (LookupError, ValueError, pack_error)
    return (LookupError, ValueError)


def _language_from_pack(module: ModuleType) -> Language | None:
    """Return the Nix language from the bundled ``tree-sitter-language-pack``."""

    get_language = getattr(module, "get_language", None)
    if not callable(get_language):
        return None
    try:
        return cast(Callable[[str], Language], get_language)(GRAMMAR_NAME)
    except _pack_errors(module) as exc:
        LOGGER.debug("language pack cannot provide the %s grammar: %s", GRAMMAR_NAME, exc)
        return None


@lru_cache(maxsize=1)
def load_nix_language() -> Language:
    """Return the compiled Tree-sitter language for Nix.

    A standalone ``tree_sitter_nix`` module takes precedence; otherwise the
    grammar bundled with ``tree-sitter-language-pack`` is used.

    Returns:
        Language: Compiled Tree-sitter language for Nix.

    Raises:
        GrammarUnavailableError: If neither provider can supply the grammar.
    """

    module = _import_module(_GRAMMAR_MODULE)
    if module is not None:
        language = _language_from_grammar_module(module)
        if language is not None:
            LOGGER.debug("loaded Nix grammar from %s", _GRAMMAR_MODULE)
            return language
    pack = _import_module(_LANGUAGE_PACK_MODULE)
    if pack is not None:
        language = _language_from_pack(pack)
        if language is not None:
            LOGGER.debug("loaded Nix grammar from %s", _LANGUAGE_PACK_MODULE)
            return language
    raise GrammarUnavailableError(
        "Unable to load the Nix Tree-sitter grammar; install tree-sitter-language-pack or tree-sitter-nix."
    )


def build_nix_parser() -> Parser:
    """Return a new Tree-sitter parser configured for Nix.

    Parsers are not shared between threads; each caller gets its own.

    Returns:
        Parser: Parser instance ready to parse Nix source code.
    """

    language = load_nix_language()
    parser = Parser()
    if hasattr(parser, "set_language"):
        setter = cast(Callable[[Language], None], getattr(parser, "set_language"))
        setter(language)
    else:
        setattr(parser, "language", language)
    return parser


__all__ = ["GRAMMAR_NAME", "build_nix_parser", "load_nix_language"]
