"""Shared fixtures: the expected transcript and a mode-neutral environment."""

from __future__ import annotations

import pytest

_MODE_VARS = (
    "CI",
    "CI_MODE",
    "SMOKE_DEMO_DETERMINISTIC",
    "SMOKE_DEMO_FORMAT",
    "SMOKE_DEMO_LOG_LEVEL",
)

TRANSCRIPT = (
    "=== JavaScript 综合测试开始 ===\n"
    "数字计算: 10 + 20 = 30\n"
    "字符串操作: 你好，尹明华！\n"
    "正在计算 6 × 7\n"
    "函数返回结果: 42\n"
    "对象测试: 我叫张三，今年25岁\n"
    "=== 测试完成 ===\n"
)


@pytest.fixture
def expected_transcript() -> str:
    return TRANSCRIPT


@pytest.fixture(autouse=True)
def _clean_mode_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _MODE_VARS:
        monkeypatch.delenv(name, raising=False)
