"""DemoResult — the schema-aligned outcome of one demo run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from smoke_demo import __version__


@dataclass(slots=True)
class DemoResult:
    """Assembled run result matching ``demo_transcript.schema.json``.

    Constructed by ``core.runner`` once every step has written its line;
    ``run_id`` and ``created_at`` come from ``utils.determinism``.
    """

    # ── run metadata ────────────────────────────────────────────────
    run_id: str
    created_at: str
    tool_version: str = __version__

    # ── transcript ──────────────────────────────────────────────────
    lines: list[str] = field(default_factory=list)

    # ── computed values ─────────────────────────────────────────────
    sum: int = 0
    greeting: str = ""
    product: int = 0
    introduction: str = ""
    completion: str = ""

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": "demo_transcript_v1",
            "run": {
                "run_id": self.run_id,
                "created_at": self.created_at,
                "tool_version": self.tool_version,
            },
            "values": {
                "sum": self.sum,
                "greeting": self.greeting,
                "product": self.product,
                "introduction": self.introduction,
            },
            "lines": list(self.lines),
            "result": self.completion,
        }
