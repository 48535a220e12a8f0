# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Source file discovery."""

from .filesystem import FilesystemDiscovery, SourceFile

__all__ = ["FilesystemDiscovery", "SourceFile"]
