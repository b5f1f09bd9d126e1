from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.urns'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings():
    from config.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def vector_image():
    return {
        "rootUrl": "https://media.licdn.com/dms/image/C4D0BAQ/",
        "artifacts": [
            {"width": 100, "height": 100, "fileIdentifyingUrlPathSegment": "100_100/logo.png"},
            {"width": 400, "height": 400, "fileIdentifyingUrlPathSegment": "400_400/logo.png"},
            {"width": 200, "height": 200, "fileIdentifyingUrlPathSegment": "200_200/logo.png"},
        ],
    }


@pytest.fixture
def raw_organization(vector_image):
    return {
        "$recipeType": "com.linkedin.voyager.dash.deco.organization.FullCompany",
        "entityUrn": "urn:li:fsd_company:42",
        "universalName": "acme",
        "name": "Acme GmbH",
        "description": "Rockets and anvils.",
        "url": "https://www.linkedin.com/company/acme/",
        "staffCount": 120,
        "staffCountRange": {"start": 51, "end": 200},
        "specialities": ["Rockets", "Anvils"],
        "foundedOn": {"year": 1949},
        "logo": {"image": {"com.linkedin.common.VectorImage": vector_image}},
        "backgroundCoverImage": {"image": {"com.linkedin.common.VectorImage": vector_image}},
        "coverPhoto": {"com.linkedin.voyager.common.MediaProcessorImage": {"id": "/AAA-cover"}},
        "overviewPhoto": {"com.linkedin.voyager.common.MediaProcessorImage": {"id": "/AAA-overview"}},
        "callToAction": {"url": "https://acme.example/jobs", "type": "VIEW_WEBSITE"},
        "phone": {"number": "+49 30 1234567"},
        "followingInfo": {"followerCount": 5300, "following": False},
        "permissions": {"canEdit": False},
        "claimable": False,
        "viewerEmployee": False,
        "paidCompany": True,
        "showcase": False,
        "trackingInfo": {"requestId": "abc"},
        "affiliatedCompaniesResolutionResults": {
            "urn:li:fsd_company:7": {
                "$recipeType": "com.linkedin.voyager.dash.deco.organization.Company",
                "entityUrn": "urn:li:fsd_company:7",
                "universalName": "acme-labs",
                "name": "Acme Labs",
                "followingInfo": {"followerCount": 12},
                "logo": {"image": {"com.linkedin.common.VectorImage": vector_image}},
                "paidCompany": False,
            },
            "urn:li:fsd_company:8": {
                "entityUrn": "urn:li:fsd_company:8",
                "name": "Acme Rockets",
            },
        },
        "groupsResolutionResults": {
            "urn:li:fsd_group:99": {
                "$recipeType": "com.linkedin.voyager.dash.deco.groups.Group",
                "entityUrn": "urn:li:fsd_group:99",
                "name": "Acme Alumni",
                "memberCount": 321,
                "logo": {"com.linkedin.common.VectorImage": vector_image},
            },
        },
        "showcasePagesResolutionResults": {
            "urn:li:fsd_company:300": {
                "entityUrn": "urn:li:fsd_company:300",
                "universalName": "acme-careers",
                "name": "Acme Careers",
                "showcase": True,
                "followingInfo": {"followerCount": 77},
            },
        },
    }
