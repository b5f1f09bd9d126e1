from __future__ import annotations

import pytest

from services.urns import extract_id, extract_update_urn, extract_urn_type, is_valid_urn


def test_extract_id_returns_last_segment():
    assert extract_id("urn:li:fs_miniProfile:ACoAAB123") == "ACoAAB123"
    assert extract_id("urn:li:fsd_company:42") == "42"


def test_extract_id_keeps_punctuation_of_trailing_segment():
    assert extract_id("urn:li:fsd_profilePosition:(ACoA,123)") == "(ACoA,123)"
    assert extract_id("urn:li:fsd_x:(a:b)") == "b)"


@pytest.mark.parametrize("value", [None, 42, {"urn": "x"}])
def test_extract_id_absent_for_non_strings(value):
    assert extract_id(value) is None


def test_extract_update_urn():
    update = "urn:li:fs_updateV2:(urn:li:activity:1,GROUP_FEED,EMPTY,DEFAULT,false)"
    assert extract_update_urn(update) == "urn:li:activity:1"


def test_extract_update_urn_trims_whitespace():
    assert extract_update_urn("urn:li:fs_updateV2:( urn:li:activity:9 ,MAIN_FEED)") == "urn:li:activity:9"


@pytest.mark.parametrize("value", [None, "urn:li:activity:1", ""])
def test_extract_update_urn_absent_without_parenthesis(value):
    assert extract_update_urn(value) is None


def test_is_valid_urn():
    assert is_valid_urn("urn:li:fs_miniProfile:123") is True
    assert is_valid_urn("urn:li:fsd_profilePositionGroup:(a,b)") is True
    assert is_valid_urn("urn:li:x") is False
    assert is_valid_urn("urn:xx:fs_miniProfile:123") is False
    assert is_valid_urn(None) is False


def test_extract_urn_type():
    assert extract_urn_type("urn:li:fsd_company:42") == "fsd_company"
    assert extract_urn_type("urn:li:x") is None
    assert extract_urn_type(None) is None
