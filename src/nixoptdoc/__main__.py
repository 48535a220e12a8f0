# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Allow ``python -m nixoptdoc`` to run the command-line interface."""

from .cli.app import app

if __name__ == "__main__":
    app(prog_name="nix-options-doc")
