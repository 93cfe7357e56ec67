"""Subprocess CLI tests: exact stdout, exit codes, byte-identical --ci JSON.

These run the real module through ``subprocess`` so interpreter start-up,
stdout encoding and process exit status are all exercised.
"""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parents[1]


def _env(**extra: str) -> dict[str, str]:
    env = {
        k: v
        for k, v in os.environ.items()
        if k not in ("CI", "CI_MODE") and not k.startswith("SMOKE_DEMO_")
    }
    env["PYTHONPATH"] = os.pathsep.join(
        [str(REPO_ROOT / "src"), env.get("PYTHONPATH", "")]
    ).strip(os.pathsep)
    env["PYTHONIOENCODING"] = "utf-8"
    env.update(extra)
    return env


def _run(*args: str, **extra_env: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "smoke_demo", *args],
        env=_env(**extra_env),
        capture_output=True,
        encoding="utf-8",
    )


def test_text_transcript_exact_match(expected_transcript: str) -> None:
    r = _run()
    assert r.returncode == 0, r.stderr
    assert r.stdout == expected_transcript
    assert r.stderr == ""


def test_verbose_logs_go_to_stderr_only(expected_transcript: str) -> None:
    r = _run("-v")
    assert r.returncode == 0, r.stderr
    assert r.stdout == expected_transcript
    assert "DEBUG smoke_demo.core.runner: sum 10 + 20 -> 30" in r.stderr


def test_ci_json_is_byte_identical_across_runs(expected_transcript: str) -> None:
    r1 = _run("--json", "--ci")
    r2 = _run("--json", "--ci")
    assert r1.returncode == 0, r1.stderr
    assert r2.returncode == 0, r2.stderr
    assert r1.stdout == r2.stdout
    doc = json.loads(r1.stdout)
    assert doc["lines"] == expected_transcript.splitlines()


def test_json_refused_under_ci_without_flag() -> None:
    r = _run("--json", CI="true")
    assert r.returncode == 2
    assert r.stdout == ""


def test_unknown_flag_is_usage_error() -> None:
    r = _run("--nope")
    assert r.returncode == 2
