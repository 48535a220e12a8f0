# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Standalone HTML rendering of option records."""

from __future__ import annotations

import re
import xml.etree.ElementTree as etree
from collections.abc import Sequence
from html import escape
from typing import Final

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from ..models import OptionRecord
from ..text import ADMONITION_KINDS
from .common import DOCUMENT_TITLE, GENERATOR_NAME, GENERATOR_URL, line_anchor, needs_block

CALLOUT_MARKER: Final[re.Pattern[str]] = re.compile(r"^\[!([A-Za-z]+)\][ \t]*\n?")
MARKDOWN_EXTENSIONS: Final[tuple[str, ...]] = ("tables", "fenced_code", "sane_lists")

_STYLESHEET: Final[str] = """\
        body { font-family: system-ui, -apple-system, sans-serif; margin: 40px auto;
               max-width: 800px; line-height: 1.6; color: #333; padding: 0 10px; }
        h1 { margin-bottom: 1.5em; }
        h2 { margin-top: 0; }
        .option { margin-bottom: 2.5em; padding-bottom: 1.5em; border-bottom: 1px solid #eee; }
        .option-name { font-family: monospace; }
        a { color: #0366d6; text-decoration: none; }
        a:hover { text-decoration: underline; }
        pre { background-color: #f6f8fa; padding: 16px; border-radius: 6px; overflow: auto; }
        code { font-family: ui-monospace, monospace; background-color: rgba(175, 184, 193, 0.2);
               padding: 0.2em 0.4em; border-radius: 3px; }
        pre code { background-color: transparent; padding: 0; border-radius: 0; font-family: inherit; }
        .metadata { margin-top: 1em; }
        .footer { margin-top: 3em; text-align: center; color: #666; font-size: 0.9em; }
        .code-container { margin-top: 0.5em; margin-bottom: 0.5em; }
        .code-multiline { background-color: #f6f8fa; border-radius: 6px; padding: 1em; margin: 0;
                          overflow: auto; font-family: ui-monospace, monospace; }
        .markdown-alert { padding: 0.5rem 1rem; margin-bottom: 16px; border-radius: 6px;
                          border-left: 0.25rem solid #d0d7de; background-color: #f6f8fa; }
        .markdown-alert p { margin: 0.5rem 0; }
        .markdown-alert-title { font-weight: bold; margin-bottom: 0.5rem !important; text-transform: uppercase; }
        .markdown-alert-note { border-left-color: #1F6FEB; background-color: rgba(31, 111, 235, 0.1); }
        .markdown-alert-tip { border-left-color: #2DA44E; background-color: rgba(45, 164, 78, 0.1); }
        .markdown-alert-important { border-left-color: #8250DF; background-color: rgba(130, 80, 223, 0.1); }
        .markdown-alert-warning { border-left-color: #9A6700; background-color: rgba(154, 103, 0, 0.1); }
        .markdown-alert-caution { border-left-color: #CF222E; background-color: rgba(207, 34, 46, 0.1); }
"""


class CalloutTreeprocessor(Treeprocessor):
    """Turn ``> [!KIND]`` block quotes into ``markdown-alert`` containers.

    Runs before inline processing, so the marker is still plain text at the
    start of the quote's first paragraph.
    """

    def run(self, root: etree.Element) -> None:
        for quote in root.iter("blockquote"):
            first = quote[0] if len(quote) else None
            if first is None or first.tag != "p" or not first.text:
                continue
            match = CALLOUT_MARKER.match(first.text)
            if match is None or match.group(1).lower() not in ADMONITION_KINDS:
                continue
            kind = match.group(1).lower()
            first.text = first.text[match.end() :]
            if not first.text.strip() and not len(first):
                quote.remove(first)
            quote.tag = "div"
            quote.set("class", f"markdown-alert markdown-alert-{kind}")
            title = etree.Element("p")
            title.set("class", "markdown-alert-title")
            title.text = kind.capitalize()
            quote.insert(0, title)


class CalloutExtension(Extension):
    """Register :class:`CalloutTreeprocessor` ahead of inline processing."""

    def extendMarkdown(self, md: markdown.Markdown) -> None:  # noqa: N802 - Markdown API name
        md.treeprocessors.register(CalloutTreeprocessor(md), "github_callouts", 25)


def build_markdown() -> markdown.Markdown:
    return markdown.Markdown(extensions=[*MARKDOWN_EXTENSIONS, CalloutExtension()])


def description_html(text: str, converter: markdown.Markdown | None = None) -> str:
    """Convert a Markdown description to an HTML fragment."""

    md = converter or build_markdown()
    md.reset()
    return md.convert(text)


def _inline_field(label: str, value: str) -> str:
    return (
        '        <div class="metadata">\n'
        f"            <strong>{label}:</strong> <code>{escape(value)}</code>\n"
        "        </div>\n"
    )


def _block_field(label: str, value: str) -> str:
    return (
        '        <div class="metadata">\n'
        f"            <strong>{label}:</strong>\n"
        '            <div class="code-container">\n'
        f'                <pre class="code-multiline"><code>{escape(value)}</code></pre>\n'
        "            </div>\n"
        "        </div>\n"
    )


def _field(label: str, value: str) -> str:
    return _block_field(label, value) if needs_block(value) else _inline_field(label, value)


def option_slug(name: str) -> str:
    return name.replace(".", "-").replace(":", "-")


def render_option(record: OptionRecord, converter: markdown.Markdown) -> str:
    """Return the HTML section describing ``record``."""

    parts = [
        f'    <div class="option" id="{escape(option_slug(record.name))}">\n'
        f'        <h2><a href="{escape(line_anchor(record.source_file, record.source_line))}" '
        f'class="option-name">{escape(record.name)}</a></h2>\n'
    ]
    if record.description is not None:
        parts.append(f'        <div class="metadata">\n{description_html(record.description, converter)}\n        </div>\n')
    parts.append(_field("Type", record.type_display))
    if record.default_value is not None:
        parts.append(_field("Default", record.default_value))
    if record.example is not None:
        parts.append(_field("Example", record.example))
    parts.append("    </div>\n\n")
    return "".join(parts)


def render_html(records: Sequence[OptionRecord]) -> str:
    """Render ``records`` as a standalone HTML page.

    Descriptions are converted from Markdown; every other value is escaped.
    """

    converter = build_markdown()
    parts = [
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '    <meta charset="UTF-8">\n'
        '    <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"    <title>{DOCUMENT_TITLE}</title>\n"
        f"    <style>\n{_STYLESHEET}    </style>\n"
        "</head>\n"
        "<body>\n"
        f"    <h1>{DOCUMENT_TITLE}</h1>\n"
    ]
    parts.extend(render_option(record, converter) for record in records)
    parts.append(
        '    <div class="footer">\n'
        f'        <p>Generated with <a href="{GENERATOR_URL}">{GENERATOR_NAME}</a></p>\n'
        "    </div>\n"
        "</body>\n"
        "</html>\n"
    )
    return "".join(parts)


__all__ = ["CalloutExtension", "build_markdown", "description_html", "option_slug", "render_html"]
