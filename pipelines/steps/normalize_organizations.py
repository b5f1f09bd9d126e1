from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from config.settings import get_settings
from pipelines.runner import RunContext
from services.included import filter_by_urn_type
from services.organization import normalize_raw_organization
from services.urns import extract_urn_type
from utils.records import dig


COMPANY_URN_TYPE = "fsd_company"


def _raw_organizations(ctx: RunContext) -> List[Dict[str, Any]]:
    candidates = filter_by_urn_type(ctx.included, COMPANY_URN_TYPE)
    data = dig(ctx.response, "data")
    if isinstance(data, dict) and extract_urn_type(data.get("entityUrn")) == COMPANY_URN_TYPE:
        if all(c.get("entityUrn") != data.get("entityUrn") for c in candidates):
            candidates.insert(0, data)
    return candidates


class NormalizeOrganizations:
    def __init__(self, keep_unidentified: Optional[bool] = None) -> None:
        self.keep_unidentified = keep_unidentified

    def run(self, ctx: RunContext) -> RunContext:
        keep = self.keep_unidentified
        if keep is None:
            keep = get_settings().keep_unidentified_nested

        organizations = []
        skipped = 0
        for raw in _raw_organizations(ctx):
            org = normalize_raw_organization(raw, keep_unidentified=keep)
            if org is None:
                skipped += 1
                continue
            organizations.append(org)

        ctx.organizations = organizations
        ctx.meta["normalized_organizations"] = len(organizations)
        ctx.meta["skipped_organizations"] = skipped
        if skipped:
            logging.warning(
                f"Skipped {skipped} unusable organization record(s)",
                extra={"step": "normalize_organizations", "status": "partial"},
            )
        return ctx
