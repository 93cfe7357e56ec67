"""
smoke_demo.api
==============

Programmatic entrypoints for running the demo without the CLI.

Goals:
  - No argparse / CLI dependencies
  - Deterministic mode support (ci_mode=True)
  - JSON-friendly outputs that match the bundled schema

Usage::

    from smoke_demo.api import run

    result, result_dict = run(ci_mode=True)
"""

from __future__ import annotations

from typing import IO, Any

from smoke_demo.console import Console
from smoke_demo.core.config import DemoConfig
from smoke_demo.core.runner import run_demo
from smoke_demo.model.demo_result import DemoResult


def run(
    *,
    ci_mode: bool = False,
    stream: IO[str] | None = None,
    echo: bool = True,
) -> tuple[DemoResult, dict[str, Any]]:
    """Run the demo and return ``(DemoResult, result_dict)``.

    Parameters
    ----------
    ci_mode:
        Fix the timestamp and derive the run id from the transcript.
    stream:
        Where transcript lines go; defaults to ``sys.stdout``.
    echo:
        When False nothing is written, the lines are only recorded.
    """
    console = Console(stream, echo=echo)
    result = run_demo(console, DemoConfig(ci_mode=ci_mode))
    return result, result.to_dict()


def validate_instance(instance: dict[str, Any], schema_name: str) -> None:
    """Validate a dict against a named bundled schema.

    Raises
    ------
    jsonschema.ValidationError
        If validation fails.
    FileNotFoundError
        If no bundled schema has that name.
    """
    from smoke_demo.contracts.load import validate_instance as _validate

    _validate(instance, schema_name)
