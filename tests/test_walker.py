# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the recursive option walker and declaration extraction."""

from __future__ import annotations

import textwrap

from nixoptdoc.extraction.walker import walk_options
from nixoptdoc.models import OptionRecord
from nixoptdoc.nix_types import BoolType, StrType, UnknownType
from nixoptdoc.syntax.nodes import parse_source


def _walk(source: str, replacements: dict[str, str] | None = None) -> list[OptionRecord]:
    parsed = parse_source(textwrap.dedent(source).strip())
    return walk_options(parsed.root, "test.nix", replacements)


def _by_name(records: list[OptionRecord]) -> dict[str, OptionRecord]:
    return {record.name: record for record in records}


def test_enable_option_in_nested_attribute_sets() -> None:
    records = _walk(
        """
        { lib, ... }:
        {
          options = {
            test = {
              simple = {
                enable = lib.mkEnableOption "simple test";
              };
            };
          };
        }
        """
    )
    assert len(records) == 1
    record = records[0]
    assert record.name == "options.test.simple.enable"
    assert record.type_kind == BoolType()
    assert record.default_value == "false"
    assert record.example == "true"
    assert record.description == "simple test"
    assert record.source_file == "test.nix"
    assert record.source_line == 6


def test_enable_option_without_description() -> None:
    records = _walk(
        """
        { lib, ... }:
        { options.demo.enable = lib.mkEnableOption (lib.concatStrings [ ]); }
        """
    )
    assert records[0].type_kind == BoolType()
    assert records[0].default_value == "false"


def test_mk_option_fields() -> None:
    records = _walk(
        '''
        { lib, ... }:
        {
          options.test.string = lib.mkOption {
            type = lib.types.str;
            default = "test";
            example = "example";
            description = "A test string option";
          };
        }
        '''
    )
    record = _by_name(records)["options.test.string"]
    assert record.type_kind == UnknownType(raw="lib.types.str")
    assert record.type_display == "lib.types.str"
    assert record.default_value == '"test"'
    assert record.example == '"example"'
    assert record.description == "A test string option"
    assert record.source_line == 3


def test_mk_option_bare_callee_and_canonical_type() -> None:
    records = _walk(
        """
        { lib, ... }:
        with lib;
        {
          options.list = mkOption {
            type = with lib.types; listOf str;
            default = [ ];
          };
          options.name = mkOption { type = types.str; };
        }
        """
    )
    by_name = _by_name(records)
    assert by_name["options.list"].type_display == "with lib.types; listOf str"
    assert by_name["options.list"].default_value == "[ ]"
    assert by_name["options.name"].type_kind == StrType()
    assert by_name["options.name"].description is None


def test_mk_option_without_type_is_any() -> None:
    records = _walk("{ options.x = lib.mkOption { description = \"x\"; }; }")
    assert records[0].type_display == "any"
    assert records[0].default_value is None
    assert records[0].example is None


def test_literal_expression_default_and_example_are_unwrapped() -> None:
    records = _walk(
        """
        { lib, ... }:
        {
          options.pkgs = lib.mkOption {
            type = lib.types.attrs;
            default = lib.literalExpression "pkgs.hello";
            example = lib.literalExpression ''
              {
                foo = 1;
              }
            '';
          };
        }
        """
    )
    record = records[0]
    assert record.default_value == "pkgs.hello"
    assert record.example == "{\n  foo = 1;\n}"


def test_multiline_description_is_normalised() -> None:
    records = _walk(
        """
        { lib, ... }:
        {
          options.docs = lib.mkOption {
            description = ''
              Uses {option}`services.nginx.enable`.

              :::{.warning}
              Be careful.
              :::
            '';
          };
        }
        """
    )
    description = records[0].description
    assert description is not None
    assert "`services.nginx.enable`" in description
    assert "{option}" not in description
    assert "> [!WARNING]  \n> Be careful." in description


def test_md_doc_wrapped_description() -> None:
    records = _walk('{ options.x = lib.mkOption { description = lib.mdDoc "Docs here"; }; }')
    assert records[0].description == "Docs here"


def test_substitution_in_names_and_descriptions() -> None:
    records = _walk(
        """
        { lib, namespace, ... }:
        {
          options.${namespace}.service = {
            enable = lib.mkEnableOption "the ${namespace} service";
          };
        }
        """,
        {"namespace": "snowflake"},
    )
    assert records[0].name == "options.snowflake.service.enable"
    assert records[0].description == "the snowflake service"


def test_unknown_placeholder_is_kept_in_name() -> None:
    records = _walk("{ options.${namespace}.enable = lib.mkEnableOption \"x\"; }")
    assert records[0].name == "options.${namespace}.enable"


def test_unrecognised_calls_and_values_are_ignored() -> None:
    records = _walk(
        """
        { lib, ... }:
        {
          options.alias = lib.mkAliasOption "x";
          options.plain = 42;
          options.list = [ (lib.mkEnableOption "hidden") ];
          config.enable = lib.mkIf true { };
        }
        """
    )
    assert records == []


def test_mk_option_nested_sets_are_not_scanned_for_keys() -> None:
    records = _walk(
        """
        {
          options.x = lib.mkOption {
            meta = { description = "nested"; };
            type = types.bool;
          };
        }
        """
    )
    assert records[0].description is None
    assert records[0].type_kind == BoolType()


def test_duplicate_names_in_one_file_keep_last_declaration() -> None:
    records = _walk(
        """
        {
          options.dup.enable = lib.mkEnableOption "first";
          options.other.enable = lib.mkEnableOption "other";
          options.dup.enable = lib.mkEnableOption "second";
        }
        """
    )
    assert [record.name for record in records] == ["options.other.enable", "options.dup.enable"]
    assert _by_name(records)["options.dup.enable"].description == "second"
    assert _by_name(records)["options.dup.enable"].source_line == 4


def test_let_bindings_and_function_bodies_are_traversed() -> None:
    records = _walk(
        """
        { lib, ... }:
        let
          cfg = { };
        in
        {
          options = with lib; {
            inner.enable = mkEnableOption "inner";
          };
        }
        """
    )
    assert [record.name for record in records] == ["options.inner.enable"]


def test_declarations_with_empty_name_segments_are_discarded() -> None:
    records = _walk('{ options."".enable = lib.mkEnableOption "x"; options.ok = lib.mkOption { }; }')
    assert [record.name for record in records] == ["options.ok"]


def test_with_body_let_expression_is_traversed() -> None:
    records = _walk(
        """
        { lib, config, ... }:
        {
          options.foo = with lib; let cfg = config.foo; in {
            enable = mkEnableOption "foo";
          };
        }
        """
    )
    assert [record.name for record in records] == ["options.foo.enable"]
    assert records[0].source_line == 4


def test_with_body_conditional_is_traversed() -> None:
    records = _walk(
        """
        { lib, ... }:
        {
          options.bar = with lib; if true then { enable = mkEnableOption "bar"; } else { };
        }
        """
    )
    assert [record.name for record in records] == ["options.bar.enable"]
