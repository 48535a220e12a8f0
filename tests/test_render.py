# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the documentation renderers."""

from __future__ import annotations

import csv
import io
import json

import pytest

from nixoptdoc.config import OutputFormat
from nixoptdoc.errors import RenderError
from nixoptdoc.models import OptionRecord
from nixoptdoc.nix_types import StrType
from nixoptdoc.render import render
from nixoptdoc.render.html import description_html


def test_markdown_layout(sample_records: list[OptionRecord]) -> None:
    document = render(sample_records, OutputFormat.MARKDOWN)
    assert document.startswith("# NixOS Module Options\n\n")
    assert "## [`services.web.enable`](modules/web.nix#L4)" in document
    assert "\nWhether to enable the web service.\n" in document
    assert "**Type:** `boolean`" in document
    assert "**Default:** `false`" in document
    assert "**Example:** `true`" in document
    assert "*Generated with [nix-options-doc]" in document


def test_markdown_uses_code_block_for_long_values() -> None:
    record = OptionRecord(
        name="x",
        type_kind=StrType(),
        default_value="{\n  a = 1;\n}",
        example="a" * 80,
        source_file="x.nix",
        source_line=1,
    )
    document = render([record], "markdown")
    assert "**Default:**\n\n```nix\n{\n  a = 1;\n}\n```" in document
    assert f"**Example:**\n\n```nix\n{'a' * 80}\n```" in document


def test_json_keys_and_values(sample_records: list[OptionRecord]) -> None:
    payload = json.loads(render(sample_records, OutputFormat.JSON))
    assert payload[0] == {
        "name": "services.web.enable",
        "description": "Whether to enable the web service.",
        "type": "boolean",
        "default": "false",
        "example": "true",
        "file_path": "modules/web.nix",
        "line_number": 4,
    }
    assert payload[1]["description"] is None


def test_csv_rows(sample_records: list[OptionRecord]) -> None:
    multiline = sample_records[0].model_copy(update={"description": "line one\nline two"})
    rows = list(csv.reader(io.StringIO(render([multiline, sample_records[1]], OutputFormat.CSV))))
    assert rows[0] == ["Option", "Type", "Default", "Example", "Description", "FilePath", "LineNumber"]
    assert rows[1] == ["services.web.enable", "boolean", "false", "true", "line one line two", "modules/web.nix", "4"]
    assert rows[2] == ["services.web.host", "string", '"localhost"', "-", "-", "modules/web.nix", "9"]


def test_html_escapes_values_and_renders_description(sample_records: list[OptionRecord]) -> None:
    record = sample_records[1].model_copy(update={"description": "Uses **bold** text", "example": "<script>"})
    document = render([record], OutputFormat.HTML)
    assert document.startswith("<!DOCTYPE html>")
    assert '<div class="option" id="services-web-host">' in document
    assert "<strong>bold</strong>" in document
    assert "<code>&lt;script&gt;</code>" in document
    assert "<code>&quot;localhost&quot;</code>" in document
    assert document.rstrip().endswith("</html>")


def test_html_callouts_become_alerts() -> None:
    fragment = description_html("> [!WARNING]  \n> This is a warning.")
    assert 'class="markdown-alert markdown-alert-warning"' in fragment
    assert '<p class="markdown-alert-title">Warning</p>' in fragment
    assert "This is a warning." in fragment
    assert "[!WARNING]" not in fragment
    assert "<blockquote>" not in fragment


def test_html_plain_blockquote_is_untouched() -> None:
    fragment = description_html("> quoted")
    assert "<blockquote>" in fragment


def test_unknown_format_raises(sample_records: list[OptionRecord]) -> None:
    with pytest.raises(RenderError):
        render(sample_records, "yaml")
