from __future__ import annotations

import logging

from pipelines.runner import RunContext
from ports.source import ResponseKind, ResponseSourcePort


class LoadResponse:
    def __init__(self, source: ResponseSourcePort, kind: ResponseKind, identifier: str) -> None:
        self.source = source
        self.kind = kind
        self.identifier = identifier

    def run(self, ctx: RunContext) -> RunContext:
        response = self.source.fetch(self.kind, self.identifier) or {}
        included = response.get("included")
        ctx.response = response
        ctx.included = included if isinstance(included, list) else []
        logging.info(
            f"Loaded {self.kind} response for {self.identifier} ({len(ctx.included)} included)",
            extra={"step": "load_response", "entity": self.identifier},
        )
        return ctx
