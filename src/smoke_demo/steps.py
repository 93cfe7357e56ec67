"""The individual demo steps: arithmetic, string building, a traced product."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smoke_demo.console import Console

GREETING_PREFIX = "你好，"
GREETING_SUFFIX = "！"


def add(a: int, b: int) -> int:
    return a + b


def build_greeting(name: str) -> str:
    return GREETING_PREFIX + name + GREETING_SUFFIX


def multiply(a: int, b: int, console: Console | None = None) -> int:
    """Return ``a * b``; when *console* is given, trace the operands first."""
    if console is not None:
        console.log("正在计算", a, "×", b)
    return a * b
