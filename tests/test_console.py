"""Tests for the line-recording Console."""

from __future__ import annotations

import io

import pytest

from smoke_demo.console import Console


def test_parts_joined_with_single_spaces() -> None:
    buf = io.StringIO()
    Console(buf).log("数字计算:", 10, "+", 20, "=", 30)
    assert buf.getvalue() == "数字计算: 10 + 20 = 30\n"


def test_single_part_written_verbatim() -> None:
    buf = io.StringIO()
    Console(buf).log("=== 测试完成 ===")
    assert buf.getvalue() == "=== 测试完成 ===\n"


def test_lines_recorded_in_order() -> None:
    console = Console(io.StringIO())
    console.log("a")
    console.log("b", 1)
    assert console.lines == ["a", "b 1"]
    assert console.transcript() == "a\nb 1\n"


def test_echo_disabled_records_without_writing() -> None:
    buf = io.StringIO()
    console = Console(buf, echo=False)
    assert console.log("x", 2) == "x 2"
    assert buf.getvalue() == ""
    assert console.lines == ["x 2"]


def test_defaults_to_current_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    Console().log("你好")
    assert capsys.readouterr().out == "你好\n"
