"""Canonical JSON serialization — single dump path for CLI output.

Guarantees:
  - Stable key ordering (``sort_keys=True``)
  - Trailing newline at EOF
  - Non-ASCII text kept literal (``ensure_ascii=False``)
"""

from __future__ import annotations

import json
from typing import Any


def stable_json_dumps(obj: Any, *, indent: int | None = 2) -> str:
    """Canonical JSON serialization used by the CLI."""
    s = json.dumps(obj, indent=indent, sort_keys=True, ensure_ascii=False)
    return s + "\n"
