"""Determinism utilities for reproducible transcripts.

When --ci / --deterministic mode is enabled:
- Timestamps are fixed to a known epoch
- Run IDs are derived from the transcript content

This keeps the JSON document identical across machines and runs. The mode
is always passed in explicitly; it is resolved once by ``DemoConfig``.
"""

from __future__ import annotations

import hashlib
import uuid
from datetime import datetime, timezone
from typing import Iterable

# Fixed timestamp for CI mode (ISO 8601 with timezone)
FIXED_TIMESTAMP = "2000-01-01T00:00:00+00:00"


def deterministic_timestamp(ci_mode: bool = False) -> str:
    """Return FIXED_TIMESTAMP in CI mode, else the current UTC time (ISO 8601)."""
    if ci_mode:
        return FIXED_TIMESTAMP
    return datetime.now(timezone.utc).isoformat()


def deterministic_run_id(lines: Iterable[str], ci_mode: bool = False) -> str:
    """Generate a run ID.

    In CI mode the ID is a digest of the transcript lines, otherwise a
    random UUID-based ID.
    """
    if ci_mode:
        content = "\n".join(lines).encode("utf-8")
        digest = hashlib.sha256(content).hexdigest()[:16]
        return f"ci-{digest}"
    return f"run-{uuid.uuid4().hex[:16]}"
