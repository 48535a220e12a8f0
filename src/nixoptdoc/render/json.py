# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""JSON rendering of option records."""

from __future__ import annotations

import json
from collections.abc import Sequence

from ..models import OptionRecord

JSON_INDENT = 2


def render_json(records: Sequence[OptionRecord]) -> str:
    """Render ``records`` as a pretty-printed JSON array."""

    payload = [record.to_document() for record in records]
    return json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False)


__all__ = ["render_json"]
