from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import LinkedInModel


class ExperienceCompany(LinkedInModel):
    entity_urn: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    logo: Optional[str] = None


class ExperienceItem(LinkedInModel):
    """One position from a profile's experience section."""

    title: Optional[str] = None
    company_name: Optional[str] = None
    employment_type: Optional[str] = None
    location: Optional[str] = None
    duration: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    description: Optional[str] = None
    company: ExperienceCompany = Field(default_factory=ExperienceCompany)
