# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line entry point for generating NixOS module option documentation."""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from ..acquire import DEFAULT_CLONE_DEPTH, prepare_path
from ..collector import collect_options
from ..config import Config
from ..config_loader import load_config
from ..console import detect_tty, get_console_manager
from ..errors import OptionsDocError
from ..logging import configure_logging, fail, ok, warn
from ..models import OptionRecord
from ..postprocess import postprocess
from ..render import render
from ._options import (
    BRANCH_OPTION,
    CONFIG_OPTION,
    DEPTH_OPTION,
    EMOJI_OPTION,
    EXCLUDE_OPTION,
    FORMAT_OPTION,
    HAS_DEFAULT_OPTION,
    HAS_DESCRIPTION_OPTION,
    JOBS_OPTION,
    NO_FOLLOW_OPTION,
    OUT_OPTION,
    PATH_OPTION,
    PATH_PREFIX_OPTION,
    PREFIX_OPTION,
    PROGRESS_OPTION,
    REPLACE_OPTION,
    SEARCH_OPTION,
    SORT_OPTION,
    STRIP_PREFIX_OPTION,
    TYPE_FILTER_OPTION,
    VERBOSE_OPTION,
    CLIOptions,
)
from .shared import CLIError, parse_replacements, split_paths

app = typer.Typer(
    name="nix-options-doc",
    help="Generate documentation for NixOS module options.",
    add_completion=False,
    no_args_is_help=False,
)


@app.command()
def main(
    path: PATH_OPTION = ".",
    out: OUT_OPTION = None,
    output_format: FORMAT_OPTION = None,
    sort: SORT_OPTION = False,
    branch: BRANCH_OPTION = None,
    depth: DEPTH_OPTION = DEFAULT_CLONE_DEPTH,
    prefix: PREFIX_OPTION = None,
    strip_prefix: STRIP_PREFIX_OPTION = None,
    path_prefix: PATH_PREFIX_OPTION = None,
    replace: REPLACE_OPTION = None,
    search: SEARCH_OPTION = None,
    type_filter: TYPE_FILTER_OPTION = None,
    has_default: HAS_DEFAULT_OPTION = False,
    has_description: HAS_DESCRIPTION_OPTION = False,
    exclude_dir: EXCLUDE_OPTION = None,
    no_follow_symlinks: NO_FOLLOW_OPTION = False,
    jobs: JOBS_OPTION = None,
    progress: PROGRESS_OPTION = False,
    config_file: CONFIG_OPTION = None,
    verbose: VERBOSE_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Collect option declarations from Nix files and render them as documentation."""

    configure_logging(verbose=verbose)
    try:
        replacements = parse_replacements(replace)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--replace") from exc

    options = CLIOptions(
        path=path,
        branch=branch,
        depth=depth,
        config_file=config_file,
        verbose=verbose,
        emoji=emoji,
        out=out,
        output_format=output_format,
        sort=sort,
        prefix=prefix,
        strip_prefix=strip_prefix,
        path_prefix=path_prefix,
        search=search,
        type_filter=type_filter,
        has_default=has_default,
        has_description=has_description,
        replacements=replacements,
        excludes=split_paths(exclude_dir),
        no_follow_symlinks=no_follow_symlinks,
        jobs=jobs,
        progress=progress,
    )
    try:
        run(options)
    except CLIError as exc:
        fail(str(exc), use_emoji=emoji)
        raise typer.Exit(code=exc.exit_code) from exc
    except OptionsDocError as exc:
        fail(str(exc), use_emoji=emoji)
        raise typer.Exit(code=1) from exc


def run(options: CLIOptions) -> None:
    """Execute one documentation run described by ``options``."""

    with prepare_path(options.path, branch=options.branch, depth=options.depth) as root:
        config = load_config(root, config_file=options.config_file, overrides=options.to_overrides())
        use_emoji = config.output.emoji
        records = _collect(root, config, verbose=options.verbose)
        if not records:
            warn("No NixOS options found in the specified path", use_emoji=use_emoji)
            return
        selected = postprocess(records, config.filter, config.output)
        if not selected:
            warn("No options match the specified filters", use_emoji=use_emoji)
            return
        document = render(selected, config.output.format)
        if config.output.writes_to_stdout:
            typer.echo(document, nl=not document.endswith("\n"))
            return
        _write_document(Path(config.output.out), document)
        ok(
            f"Found {len(selected)} options (filtered from {len(records)} total). "
            f"Documentation generated in: {config.output.out}",
            use_emoji=use_emoji,
        )


def _collect(root: Path, config: Config, *, verbose: bool) -> list[OptionRecord]:
    """Collect records, driving a progress bar when requested and attached to a terminal."""

    if not (config.collect.show_progress and detect_tty(sys.stderr)):
        return collect_options(root, config.collect)

    console = get_console_manager().get(color=True, emoji=config.output.emoji, stderr=True)
    bar = Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        BarColumn(bar_width=None),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=not verbose,
    )
    task_id = bar.add_task("Processing files", total=None)

    def progress_callback(completed: int, total: int) -> None:
        bar.update(task_id, completed=completed, total=total)

    with bar:
        return collect_options(root, config.collect, progress=progress_callback)


def _write_document(target: Path, document: str) -> None:
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(document, encoding="utf-8")
    except OSError as exc:
        raise CLIError(f"Unable to write documentation to {target}: {exc}") from exc


__all__ = ["app", "main", "run"]
