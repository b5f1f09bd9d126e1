from __future__ import annotations

from typing import Any, Dict, List, Optional

from models.experience import ExperienceItem
from models.organization import Organization
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import NormalizeOrganizations, ParseExperiences


def _context(response: Optional[Dict[str, Any]]) -> RunContext:
    response = response or {}
    included = response.get("included")
    return RunContext(response=response, included=included if isinstance(included, list) else [])


def normalize_company_response(
    response: Optional[Dict[str, Any]],
    keep_unidentified: Optional[bool] = None,
) -> List[Organization]:
    ctx = Pipeline([NormalizeOrganizations(keep_unidentified)]).run(_context(response))
    return ctx.organizations


def normalize_experience_response(response: Optional[Dict[str, Any]]) -> List[ExperienceItem]:
    ctx = Pipeline([ParseExperiences()]).run(_context(response))
    return ctx.experiences
