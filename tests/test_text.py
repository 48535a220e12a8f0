# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for description, default and example normalisation."""

from __future__ import annotations

import pytest

from nixoptdoc.text import (
    apply_replacements,
    clean_description,
    convert_admonitions,
    dedent_tail,
    normalize_description,
    string_payload,
    strip_directives,
    unwrap_literal_expression,
)


def test_dedent_keeps_first_line_and_strips_common_indent() -> None:
    assert dedent_tail("A\n  B\n  C") == "A\nB\nC"


def test_dedent_preserves_relative_indentation() -> None:
    assert dedent_tail("head\n    one\n      two\n    three") == "head\none\n  two\nthree"


def test_dedent_single_line_is_unchanged() -> None:
    assert dedent_tail("  only line  ") == "  only line  "


def test_replacements_substitute_known_names_only() -> None:
    text = "Enable ${namespace} support for ${user}"
    assert apply_replacements(text, {"namespace": "snowflake"}) == "Enable snowflake support for ${user}"


def test_replacements_without_table_return_input() -> None:
    assert apply_replacements("${namespace}", {}) == "${namespace}"


def test_strip_directives_keeps_code_span() -> None:
    assert strip_directives("See {option}`services.foo.enable` and {var}`x`.") == (
        "See `services.foo.enable` and `x`."
    )


def test_admonition_conversion_matches_callout_format() -> None:
    assert convert_admonitions(":::{.warning}\nThis is a warning.\n:::") == "> [!WARNING]  \n> This is a warning."


@pytest.mark.parametrize(
    ("kind", "label"),
    [
        ("note", "NOTE"),
        ("tip", "TIP"),
        ("important", "IMPORTANT"),
        ("caution", "CAUTION"),
        ("Warning", "WARNING"),
        ("danger", "NOTE"),
    ],
)
def test_admonition_labels(kind: str, label: str) -> None:
    converted = convert_admonitions(f":::{{.{kind}}}\nBody\n:::")
    assert converted.startswith(f"> [!{label}]  \n")


def test_admonition_prefixes_every_content_line_including_code() -> None:
    source = ":::{.note}\nRun this:\n```\nnix build\n```\n:::"
    assert convert_admonitions(source) == "> [!NOTE]  \n> Run this:\n> ```\n> nix build\n> ```"


def test_clean_description_handles_directives_and_admonitions() -> None:
    source = "Intro {command}`ls`\n\n:::{.tip}\nUse {file}`/etc`.\n:::"
    assert clean_description(source) == "Intro `ls`\n\n> [!TIP]  \n> Use `/etc`."


def test_normalize_description_pipeline() -> None:
    source = "Enable ${namespace}.\n    :::{.caution}\n    Careful.\n    :::"
    assert normalize_description(source, {"namespace": "snowflake"}) == (
        "Enable snowflake.\n> [!CAUTION]  \n> Careful."
    )


@pytest.mark.parametrize(
    "source",
    [
        "Plain text",
        "First\n    second\n      third",
        ":::{.important}\n  Indented body\n:::",
        "Uses {option}`a.b` and ${missing}",
        "\n  leading blank\n  lines\n",
    ],
)
def test_normalize_description_is_idempotent(source: str) -> None:
    once = normalize_description(source, {"namespace": "x"})
    assert normalize_description(once, {"namespace": "x"}) == once


def test_unwrap_literal_expression_indented_string() -> None:
    value = "lib.literalExpression ''\n  {\n    foo = 1;\n  }\n''"
    assert unwrap_literal_expression(value) == "{\n    foo = 1;\n  }"


def test_unwrap_literal_expression_double_quotes() -> None:
    assert unwrap_literal_expression('literalExpression "pkgs.hello"') == "pkgs.hello"


def test_unwrap_literal_expression_namespaced_marker() -> None:
    assert unwrap_literal_expression('lib.options.literalExpression "x"') == "x"


def test_unwrap_ignores_plain_values() -> None:
    assert unwrap_literal_expression('  "\\"test\\""  ') == '"\\"test\\""'
    assert unwrap_literal_expression("[ 1 2 ]") == "[ 1 2 ]"


def test_unwrap_without_delimiter_returns_text() -> None:
    assert unwrap_literal_expression("literalExpression someVariable") == "literalExpression someVariable"


@pytest.mark.parametrize(
    ("literal", "payload"),
    [
        ('"hello"', "hello"),
        ("''\n  multi\n''", "\n  multi\n"),
        ("plain", "plain"),
    ],
)
def test_string_payload(literal: str, payload: str) -> None:
    assert string_payload(literal) == payload
