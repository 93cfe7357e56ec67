"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — transcript written
  1   Violation — produced document failed its schema contract
  2   Error — usage error or runtime failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
