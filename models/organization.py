from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import LinkedInModel
from .dates import LIDate


class _PageSummary(LinkedInModel):
    """Fields shared by affiliated companies and showcase pages."""

    id: Optional[str] = None
    entity_urn: Optional[str] = None
    public_identifier: Optional[str] = None
    name: Optional[str] = None
    tagline: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    staff_count: Optional[int] = None
    num_followers: Optional[int] = None
    logo: Optional[str] = None


class AffiliatedCompany(_PageSummary):
    pass


class ShowcasePage(_PageSummary):
    pass


class Group(LinkedInModel):
    id: Optional[str] = None
    entity_urn: Optional[str] = None
    group_name: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    member_count: Optional[int] = None
    logo: Optional[str] = None


class Organization(LinkedInModel):
    """Normalized company page.

    Only the fields declared here survive normalization; unknown raw keys are
    dropped during validation.
    """

    id: str
    entity_urn: Optional[str] = None
    public_identifier: Optional[str] = None
    name: Optional[str] = None
    tagline: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    company_page_url: Optional[str] = None
    job_search_page_url: Optional[str] = None
    staff_count: Optional[int] = None
    staff_count_range: Optional[Dict[str, Any]] = None
    headquarter: Optional[Dict[str, Any]] = None
    confirmed_locations: List[Dict[str, Any]] = Field(default_factory=list)
    company_industries: List[Dict[str, Any]] = Field(default_factory=list)
    specialities: List[str] = Field(default_factory=list)
    founded_on: Optional[LIDate] = None
    company_type: Optional[Dict[str, Any]] = None
    page_verified: Optional[bool] = None

    logo: Optional[str] = None
    background_cover_image: Optional[str] = None
    cover_photo: Optional[str] = None
    overview_photo: Optional[str] = None
    call_to_action_url: Optional[str] = None
    phone: Optional[str] = None
    num_followers: Optional[int] = None

    affiliated_companies_resolution_results: Dict[str, AffiliatedCompany] = Field(default_factory=dict)
    groups_resolution_results: Dict[str, Group] = Field(default_factory=dict)
    showcase_pages_resolution_results: Dict[str, ShowcasePage] = Field(default_factory=dict)
