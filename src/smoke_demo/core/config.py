"""Demo configuration dataclass."""

from __future__ import annotations

import os
from dataclasses import dataclass

TRUTHY_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class DemoConfig:
    """Immutable run configuration.

    Environment variables provide defaults; CLI flags override them.
    """

    output_format: str = "text"   # text | json
    ci_mode: bool = False
    log_level: str | None = None  # None leaves logging unconfigured

    @classmethod
    def from_env(cls) -> DemoConfig:
        """Build a config from ``SMOKE_DEMO_*`` environment variables."""
        output_format = os.getenv("SMOKE_DEMO_FORMAT", "text").strip().lower() or "text"
        if output_format not in ("text", "json"):
            raise ValueError(
                f"SMOKE_DEMO_FORMAT must be 'text' or 'json', got {output_format!r}"
            )
        ci_mode = (
            os.getenv("SMOKE_DEMO_DETERMINISTIC", "").lower() in TRUTHY_VALUES
            or os.getenv("CI_MODE", "").lower() in TRUTHY_VALUES
        )
        log_level = os.getenv("SMOKE_DEMO_LOG_LEVEL") or None
        return cls(
            output_format=output_format,
            ci_mode=ci_mode,
            log_level=log_level.upper() if log_level else None,
        )
