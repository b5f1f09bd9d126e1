from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Type, TypeVar

from pydantic import ValidationError

from models.base import LinkedInModel
from models.organization import AffiliatedCompany, Group, Organization, ShowcasePage
from services.images import resolve_linked_vector_image_url, resolve_media_processor_image_id
from services.urns import extract_id
from utils.records import as_mapping, dig, omit


ORGANIZATION_OMIT_KEYS = (
    "universalName",
    "logo",
    "backgroundCoverImage",
    "coverPhoto",
    "overviewPhoto",
    "$recipeType",
    "callToAction",
    "phone",
    "permissions",
    "followingInfo",
    "adsRule",
    "autoGenerated",
    "lcpTreatment",
    "staffingCompany",
    "showcase",
    "paidCompany",
    "claimable",
    "claimableByViewer",
    "viewerPendingAdministrator",
    "viewerConnectedToAdministrator",
    "viewerFollowingJobsUpdates",
    "viewerEmployee",
    "associatedHashtags",
    "associatedHashtagsResolutionResults",
    "affiliatedCompaniesResolutionResults",
    "groupsResolutionResults",
    "showcasePagesResolutionResults",
)

# Affiliated companies and showcase pages
PAGE_OMIT_KEYS = (
    "universalName",
    "logo",
    "$recipeType",
    "followingInfo",
    "showcase",
    "paidCompany",
)

GROUP_OMIT_KEYS = ("logo", "$recipeType")

M = TypeVar("M", bound=LinkedInModel)


def _build(model: Type[M], payload: Dict[str, Any]) -> Optional[M]:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logging.warning(
            f"Skipping malformed {model.__name__}: {e.error_count()} invalid field(s)",
            extra={"entity": payload.get("entityUrn"), "status": "invalid"},
        )
        return None


def _page_payload(raw: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        **omit(raw, *PAGE_OMIT_KEYS),
        "id": extract_id(raw.get("entityUrn")),
        "publicIdentifier": raw.get("universalName"),
        "numFollowers": dig(raw, "followingInfo", "followerCount"),
        "logo": resolve_linked_vector_image_url(dig(raw, "logo", "image")),
    }


def normalize_raw_affiliated_company(raw: Any) -> Optional[AffiliatedCompany]:
    if not isinstance(raw, Mapping):
        return None
    return _build(AffiliatedCompany, _page_payload(raw))


def normalize_raw_showcase_page(raw: Any) -> Optional[ShowcasePage]:
    if not isinstance(raw, Mapping):
        return None
    return _build(ShowcasePage, _page_payload(raw))


def normalize_raw_group(raw: Any) -> Optional[Group]:
    """Groups carry their logo wrapper directly, without an `image` level."""
    if not isinstance(raw, Mapping):
        return None
    payload = {
        **omit(raw, *GROUP_OMIT_KEYS),
        "id": extract_id(raw.get("entityUrn")),
        "logo": resolve_linked_vector_image_url(raw.get("logo")),
    }
    return _build(Group, payload)


def _normalize_mapping(
    raw: Any,
    normalize: Callable[[Any], Optional[M]],
    keep_unidentified: bool,
) -> Dict[str, M]:
    normalized: Dict[str, M] = {}
    for key, value in as_mapping(raw).items():
        entity = normalize(value)
        if entity is None:
            continue
        if not entity.id and not keep_unidentified:  # type: ignore[attr-defined]
            logging.debug(f"Dropping nested entity {key!r} without an id")
            continue
        normalized[key] = entity
    return normalized


def normalize_raw_organization(
    raw: Any,
    *,
    keep_unidentified: bool = False,
) -> Optional[Organization]:
    """Turn a raw company payload into an Organization.

    Returns None only when no id can be derived from the entity URN; callers
    should skip such records. Malformed optional fields fall back to their
    defaults. Nested resolution results keep their raw keys. Entries without
    an id are dropped unless `keep_unidentified` is set, in which case they
    keep `id=None`.
    """
    if not isinstance(raw, Mapping):
        return None

    org_id = extract_id(raw.get("entityUrn"))
    if not org_id:
        logging.warning(
            "Organization without a usable entityUrn",
            extra={"entity": raw.get("entityUrn"), "status": "skipped"},
        )
        return None

    payload = {
        **omit(raw, *ORGANIZATION_OMIT_KEYS),
        "id": org_id,
        "publicIdentifier": raw.get("universalName"),
        "logo": resolve_linked_vector_image_url(dig(raw, "logo", "image")),
        "backgroundCoverImage": resolve_linked_vector_image_url(dig(raw, "backgroundCoverImage", "image")),
        "coverPhoto": resolve_media_processor_image_id(raw.get("coverPhoto")),
        "overviewPhoto": resolve_media_processor_image_id(raw.get("overviewPhoto")),
        "callToActionUrl": dig(raw, "callToAction", "url"),
        "phone": dig(raw, "phone", "number"),
        "numFollowers": dig(raw, "followingInfo", "followerCount"),
        "affiliatedCompaniesResolutionResults": _normalize_mapping(
            raw.get("affiliatedCompaniesResolutionResults"),
            normalize_raw_affiliated_company,
            keep_unidentified,
        ),
        "groupsResolutionResults": _normalize_mapping(
            raw.get("groupsResolutionResults"),
            normalize_raw_group,
            keep_unidentified,
        ),
        "showcasePagesResolutionResults": _normalize_mapping(
            raw.get("showcasePagesResolutionResults"),
            normalize_raw_showcase_page,
            keep_unidentified,
        ),
    }
    return _build(Organization, payload)
