from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Sequence

from models.experience import ExperienceCompany, ExperienceItem
from services.images import resolve_image_url
from services.included import find_by_urn, find_by_urn_suffix
from services.urns import extract_id
from utils.records import as_mapping, dig, dig_str


COMPANY_URN_PREFIX = "urn:li:fsd_company:"
PART_SEPARATOR = " · "
DATE_RANGE_SEPARATOR = " - "

_POSITION_GROUP_MARKER = "fsd_profilePositionGroup"
_POSITION_GROUP_RE = re.compile(r"urn:li:fsd_profilePositionGroup:\([0-9A-Za-z]+,[0-9A-Za-z]+\)")


def _split(text: Optional[str], separator: str) -> List[str]:
    # Empty text has no parts, so "" never becomes a company or date
    if not text:
        return []
    return text.split(separator)


def _part(parts: Sequence[str], index: int) -> Optional[str]:
    return parts[index] if index < len(parts) else None


def _resolve_company_id(component: Dict[str, Any]) -> Optional[str]:
    company_id = extract_id(dig(component, "image", "attributes", 0, "*companyLogo"))
    if company_id:
        return company_id
    action_target = dig_str(component, "image", "actionTarget")
    if not action_target:
        return None
    segments = [s for s in action_target.split("/") if s]
    return segments[-1] if segments else None


def _resolve_company_logo(company_id: Optional[str], included: Optional[Sequence[Any]]) -> Optional[str]:
    if not company_id:
        return None
    entity = find_by_urn_suffix(included, company_id)
    if entity is None:
        return None
    return resolve_image_url(dig(entity, "logoResolutionResult", "vectorImage"))


def parse_experience_item(
    item: Any,
    *,
    is_group_item: bool = False,
    included: Optional[Sequence[Any]] = None,
) -> ExperienceItem:
    """Parse one entity component of a profile's experience section.

    Grouped items sit under an employer header, so the first subtitle part is
    the employment type and the company name is left to the caller.
    """
    component = as_mapping(dig(item, "components", "entityComponent"))

    title = dig_str(component, "titleV2", "text", "text")
    subtitle_parts = _split(dig_str(component, "subtitle", "text"), PART_SEPARATOR)
    company = _part(subtitle_parts, 0)
    employment_type = _part(subtitle_parts, 1)

    company_id = _resolve_company_id(component)
    company_urn = f"{COMPANY_URN_PREFIX}{company_id}" if company_id else None
    company_logo = _resolve_company_logo(company_id, included)

    metadata = component.get("metadata") or {}
    location = dig_str(metadata, "text")

    duration_parts = _split(dig_str(component, "caption", "text"), PART_SEPARATOR)
    date_parts = _split(_part(duration_parts, 0), DATE_RANGE_SEPARATOR)

    description = dig_str(
        component,
        "subComponents", "components", 0, "components",
        "fixedListComponent", "components", 0, "components",
        "textComponent", "text", "text",
    )

    return ExperienceItem(
        title=title,
        company_name=company if not is_group_item else None,
        employment_type=company if is_group_item else employment_type,
        location=location,
        duration=_part(duration_parts, 1),
        start_date=_part(date_parts, 0),
        end_date=_part(date_parts, 1),
        description=description,
        company=ExperienceCompany(
            entity_urn=company_urn,
            id=company_id,
            name=company if not is_group_item else None,
            logo=company_logo,
        ),
    )


def _paged_list_reference(item: Any) -> Optional[str]:
    return dig_str(
        item,
        "components", "entityComponent", "subComponents", "components", 0,
        "components", "*pagedListComponent",
    )


def get_grouped_item_id(item: Any) -> Optional[str]:
    """Return the position-group URN of a grouped experience header, if any."""
    reference = _paged_list_reference(item)
    if not reference or _POSITION_GROUP_MARKER not in reference:
        return None
    match = _POSITION_GROUP_RE.search(reference)
    return match.group(0) if match else None


def _group_members(item: Any, included: Optional[Sequence[Any]]) -> Optional[List[Any]]:
    paged_list = find_by_urn(included, _paged_list_reference(item))
    elements = dig(paged_list, "components", "elements")
    return elements if isinstance(elements, list) else None


def parse_experience_items(
    items: Optional[Sequence[Any]],
    *,
    included: Optional[Sequence[Any]] = None,
) -> List[ExperienceItem]:
    """Parse an experience section, expanding grouped positions.

    A grouped item is the employer header; its positions live in the paged
    list component it references and inherit the header's employer.
    """
    experiences: List[ExperienceItem] = []
    for item in items or []:
        group_id = get_grouped_item_id(item)
        if group_id is None:
            experiences.append(parse_experience_item(item, included=included))
            continue

        members = _group_members(item, included)
        if members is None:
            logging.debug(f"Position group {group_id} not present in included")
            continue

        header = parse_experience_item(item, included=included)
        company = header.company.model_copy(update={"name": header.title})
        for member in members:
            position = parse_experience_item(member, is_group_item=True, included=included)
            experiences.append(
                position.model_copy(update={"company_name": header.title, "company": company})
            )
    return experiences


def get_unresolved_group_ids(
    items: Optional[Sequence[Any]],
    *,
    included: Optional[Sequence[Any]] = None,
) -> List[str]:
    """Position groups whose member list still has to be fetched."""
    unresolved: List[str] = []
    for item in items or []:
        group_id = get_grouped_item_id(item)
        if group_id and _group_members(item, included) is None:
            unresolved.append(group_id)
    return unresolved
