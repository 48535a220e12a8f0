# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Generate documentation for NixOS module options declared in Nix source trees."""

from .collector import collect_options
from .config import CollectionConfig, Config, FilterConfig, OutputConfig, OutputFormat
from .errors import (
    ConfigError,
    GrammarUnavailableError,
    OptionsDocError,
    RenderError,
    RepositoryFetchError,
    RootNotFoundError,
    SourceParseError,
)
from .models import OptionRecord
from .nix_types import TypeKind, classify
from .render import render

__version__ = "0.1.0"

__all__ = [
    "CollectionConfig",
    "Config",
    "ConfigError",
    "FilterConfig",
    "GrammarUnavailableError",
    "OptionRecord",
    "OptionsDocError",
    "OutputConfig",
    "OutputFormat",
    "RenderError",
    "RepositoryFetchError",
    "RootNotFoundError",
    "SourceParseError",
    "TypeKind",
    "__version__",
    "classify",
    "collect_options",
    "render",
]
