from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from utils.logging_setup import init_logging


@dataclass
class RunContext:
    response: Optional[Dict[str, Any]] = None
    included: list = field(default_factory=list)
    items: list = field(default_factory=list)
    organizations: list = field(default_factory=list)
    experiences: list = field(default_factory=list)
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            name = type(step).__name__
            started = time.perf_counter()
            ctx = step.run(ctx)
            logging.info(
                f"Step {name} finished",
                extra={
                    "step": name,
                    "status": "ok",
                    "duration_ms": int((time.perf_counter() - started) * 1000),
                },
            )
        return ctx
