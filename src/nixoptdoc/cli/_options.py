# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option declarations and override mapping for the command line."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Any

import typer

from ..config import OutputFormat

PATH_OPTION = Annotated[
    str,
    typer.Option("--path", "-p", help="Local directory or git URL to scan."),
]
OUT_OPTION = Annotated[
    str | None,
    typer.Option("--out", "-o", help="Output file, or 'stdout'."),
]
FORMAT_OPTION = Annotated[
    OutputFormat | None,
    typer.Option("--format", "-f", case_sensitive=False, help="Output format."),
]
SORT_OPTION = Annotated[
    bool,
    typer.Option("--sort", "-s", help="Sort options alphabetically by name."),
]
BRANCH_OPTION = Annotated[
    str | None,
    typer.Option("--branch", "-b", help="Git branch or tag to clone."),
]
DEPTH_OPTION = Annotated[
    int,
    typer.Option("--depth", "-d", min=1, help="Commit depth for the clone."),
]
PREFIX_OPTION = Annotated[
    str | None,
    typer.Option("--prefix", help="Only document options whose name starts with this prefix."),
]
STRIP_PREFIX_OPTION = Annotated[
    str | None,
    typer.Option("--strip-prefix", help="Remove this leading prefix from option names."),
]
PATH_PREFIX_OPTION = Annotated[
    str | None,
    typer.Option("--path-prefix", help="Prepend this base (e.g. a repository URL) to file paths."),
]
REPLACE_OPTION = Annotated[
    list[str] | None,
    typer.Option("--replace", metavar="KEY=VALUE", help="Substitute ${KEY} with VALUE (repeatable)."),
]
SEARCH_OPTION = Annotated[
    str | None,
    typer.Option("--search", help="Case-insensitive search in names and descriptions."),
]
TYPE_FILTER_OPTION = Annotated[
    str | None,
    typer.Option("--type-filter", help="Only document options whose type contains this text."),
]
HAS_DEFAULT_OPTION = Annotated[
    bool,
    typer.Option("--has-default", help="Only document options that declare a default."),
]
HAS_DESCRIPTION_OPTION = Annotated[
    bool,
    typer.Option("--has-description", help="Only document options that declare a description."),
]
EXCLUDE_OPTION = Annotated[
    list[str] | None,
    typer.Option("--exclude-dir", "-e", help="Directory to skip (repeatable, comma-separated)."),
]
NO_FOLLOW_OPTION = Annotated[
    bool,
    typer.Option("--no-follow-symlinks", help="Do not follow symbolic links while scanning."),
]
JOBS_OPTION = Annotated[
    int | None,
    typer.Option("--jobs", "-j", min=1, help="Number of files processed in parallel."),
]
PROGRESS_OPTION = Annotated[
    bool,
    typer.Option("--progress", "-P", help="Show a progress bar while scanning."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Configuration file (defaults to nix-options-doc.toml in the scanned root)."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable debug logging."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]


@dataclass(slots=True)
class CLIOptions:
    """Capture values supplied on the command line.

    ``None`` and ``False`` mean "not given" so configuration-file values
    survive unless explicitly overridden.
    """

    path: str
    branch: str | None
    depth: int
    config_file: Path | None
    verbose: bool
    emoji: bool
    out: str | None = None
    output_format: OutputFormat | None = None
    sort: bool = False
    prefix: str | None = None
    strip_prefix: str | None = None
    path_prefix: str | None = None
    search: str | None = None
    type_filter: str | None = None
    has_default: bool = False
    has_description: bool = False
    replacements: dict[str, str] = field(default_factory=dict)
    excludes: list[Path] = field(default_factory=list)
    no_follow_symlinks: bool = False
    jobs: int | None = None
    progress: bool = False

    def to_overrides(self) -> dict[str, Any]:
        """Return the section-keyed configuration values set on the command line."""

        collect: dict[str, Any] = {}
        if self.replacements:
            collect["replacements"] = dict(self.replacements)
        if self.excludes:
            collect["excludes"] = list(self.excludes)
        if self.no_follow_symlinks:
            collect["follow_symlinks"] = False
        if self.jobs is not None:
            collect["jobs"] = self.jobs
        if self.progress:
            collect["show_progress"] = True

        filters = _present(
            prefix=self.prefix,
            type_filter=self.type_filter,
            search=self.search,
            has_default=self.has_default or None,
            has_description=self.has_description or None,
        )
        output = _present(
            format=self.output_format,
            out=self.out,
            sort=self.sort or None,
            strip_prefix=self.strip_prefix,
            path_prefix=self.path_prefix,
        )
        if not self.emoji:
            output["emoji"] = False

        overrides: dict[str, Any] = {}
        for name, section in (("collect", collect), ("filter", filters), ("output", output)):
            if section:
                overrides[name] = section
        return overrides


def _present(**values: Any) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


__all__ = ["CLIOptions"]
