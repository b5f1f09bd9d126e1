from .base import LinkedInModel
from .dates import LIDate
from .images import Artifact, VectorImage, MediaProcessorImage, LinkedImage, LINKED_IMAGE_VARIANTS
from .experience import ExperienceCompany, ExperienceItem
from .organization import AffiliatedCompany, Group, Organization, ShowcasePage

__all__ = [
    "LinkedInModel",
    "LIDate",
    "Artifact",
    "VectorImage",
    "MediaProcessorImage",
    "LinkedImage",
    "LINKED_IMAGE_VARIANTS",
    "ExperienceCompany",
    "ExperienceItem",
    "AffiliatedCompany",
    "Group",
    "Organization",
    "ShowcasePage",
]
