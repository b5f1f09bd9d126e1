from __future__ import annotations

import logging
from typing import Any, List

from pipelines.runner import RunContext
from services.experience import get_unresolved_group_ids, parse_experience_items
from utils.records import dig


def _find_experience_items(included: List[Any]) -> List[Any]:
    """Elements of the first paged list whose entries are entity components.

    Member lists of position groups are skipped; they are expanded from their
    group header.
    """
    for entity in included:
        if "fsd_profilePositionGroup" in str(dig(entity, "entityUrn") or ""):
            continue
        elements = dig(entity, "components", "elements")
        if not isinstance(elements, list) or not elements:
            continue
        if dig(elements, 0, "components", "entityComponent") is not None:
            return elements
    return []


class ParseExperiences:
    def run(self, ctx: RunContext) -> RunContext:
        items = ctx.items or _find_experience_items(ctx.included)
        ctx.items = items
        ctx.experiences = parse_experience_items(items, included=ctx.included)

        unresolved = get_unresolved_group_ids(items, included=ctx.included)
        ctx.meta["parsed_experiences"] = len(ctx.experiences)
        ctx.meta["unresolved_position_groups"] = unresolved
        if unresolved:
            logging.info(
                f"{len(unresolved)} position group(s) need a follow-up fetch",
                extra={"step": "parse_experiences", "status": "partial"},
            )
        return ctx
