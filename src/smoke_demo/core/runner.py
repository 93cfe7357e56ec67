"""Runner — executes the demo steps in order and builds a DemoResult."""

from __future__ import annotations

import logging

from smoke_demo.console import Console
from smoke_demo.contracts.load import validate_instance
from smoke_demo.core.config import DemoConfig
from smoke_demo.model.demo_result import DemoResult
from smoke_demo.model.person import Person
from smoke_demo.steps import add, build_greeting, multiply
from smoke_demo.utils.determinism import deterministic_run_id, deterministic_timestamp

_logger = logging.getLogger(__name__)

BANNER_START = "=== JavaScript 综合测试开始 ==="
BANNER_END = "=== 测试完成 ==="
COMPLETION = "所有测试都通过了！"

NUM1 = 10
NUM2 = 20
NAME = "尹明华"
FACTORS = (6, 7)
PERSON = Person(name="张三", age=25)


def run_demo(
    console: Console | None = None,
    config: DemoConfig | None = None,
) -> DemoResult:
    """Write the transcript to *console* and return the assembled ``DemoResult``.

    The document is validated against ``demo_transcript.schema.json``
    before it is returned; ``jsonschema.ValidationError`` propagates.
    """
    console = console if console is not None else Console()
    cfg = config or DemoConfig()

    console.log(BANNER_START)

    # ── 1. arithmetic ───────────────────────────────────────────────
    total = add(NUM1, NUM2)
    _logger.debug("sum %d + %d -> %d", NUM1, NUM2, total)
    console.log("数字计算:", NUM1, "+", NUM2, "=", total)

    # ── 2. string concatenation ─────────────────────────────────────
    greeting = build_greeting(NAME)
    _logger.debug("greeting built for %s", NAME)
    console.log("字符串操作:", greeting)

    # ── 3. traced function call ─────────────────────────────────────
    product = multiply(*FACTORS, console=console)
    _logger.debug("product %d x %d -> %d", FACTORS[0], FACTORS[1], product)
    console.log("函数返回结果:", product)

    # ── 4. object method ────────────────────────────────────────────
    introduction = PERSON.greet()
    _logger.debug("introduction from %r", PERSON)
    console.log("对象测试:", introduction)

    console.log(BANNER_END)

    result = DemoResult(
        run_id=deterministic_run_id(console.lines, ci_mode=cfg.ci_mode),
        created_at=deterministic_timestamp(ci_mode=cfg.ci_mode),
        lines=list(console.lines),
        sum=total,
        greeting=greeting,
        product=product,
        introduction=introduction,
        completion=COMPLETION,
    )
    validate_instance(result.to_dict(), "demo_transcript.schema.json")
    _logger.debug("run %s finished with %d lines", result.run_id, len(result.lines))
    return result
