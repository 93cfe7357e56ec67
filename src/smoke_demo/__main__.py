"""CLI entry-point for smoke_demo.

Usage:
    python -m smoke_demo
    python -m smoke_demo --json
    python -m smoke_demo --json --ci
    python -m smoke_demo -v
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace

import jsonschema

from smoke_demo import __version__
from smoke_demo.console import Console
from smoke_demo.core.config import TRUTHY_VALUES, DemoConfig
from smoke_demo.core.runner import run_demo
from smoke_demo.utils.exit_codes import ExitCode
from smoke_demo.utils.json_norm import stable_json_dumps

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _env_requires_ci_mode() -> bool:
    """Return True when the environment signals deterministic mode is required."""
    return os.getenv("CI", "").lower() in TRUTHY_VALUES


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="smoke-demo",
        description="Print a fixed transcript: a sum, a greeting, a traced product and a self-introduction.",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=None,
        help="Print the full transcript document as JSON instead of text.",
    )
    p.add_argument(
        "--ci",
        "--deterministic",
        dest="ci_mode",
        action="store_true",
        default=None,
        help="Enable deterministic output (fixed timestamp, content-derived run id).",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log each step at DEBUG level to stderr.",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Explicit log level for stderr logging.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def _resolve_config(args: argparse.Namespace) -> DemoConfig:
    """Environment defaults, overridden by whatever flags were passed."""
    cfg = DemoConfig.from_env()
    if args.json_out:
        cfg = replace(cfg, output_format="json")
    if args.ci_mode:
        cfg = replace(cfg, ci_mode=True)
    if args.log_level:
        cfg = replace(cfg, log_level=args.log_level)
    elif args.verbose:
        cfg = replace(cfg, log_level="DEBUG")
    return cfg


def _configure_logging(level: str | None) -> None:
    if level is None:
        return
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr)


def _use_utf8_stdout() -> None:
    encoding = (getattr(sys.stdout, "encoding", None) or "").lower().replace("-", "")
    if encoding == "utf8":
        return
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (see ``ExitCode``)."""
    args = _build_parser().parse_args(argv)

    try:
        cfg = _resolve_config(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    _configure_logging(cfg.log_level)

    json_out = cfg.output_format == "json"
    if json_out and _env_requires_ci_mode() and not cfg.ci_mode:
        print(
            "error: CI environment requires deterministic mode for --json. "
            "Re-run with --ci/--deterministic.",
            file=sys.stderr,
        )
        return ExitCode.ERROR

    _use_utf8_stdout()

    try:
        result = run_demo(Console(echo=not json_out), cfg)
    except jsonschema.ValidationError as e:
        print(f"FAIL: {e.message}", file=sys.stderr)
        return ExitCode.VIOLATION
    except Exception as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if json_out:
        sys.stdout.write(stable_json_dumps(result.to_dict()))
    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
