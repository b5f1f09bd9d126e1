# Namespace for pipeline steps
from .load_response import LoadResponse  # noqa: F401
from .normalize_organizations import NormalizeOrganizations  # noqa: F401
from .parse_experiences import ParseExperiences  # noqa: F401
