from __future__ import annotations

from typing import Any, Optional


URN_PREFIX = "urn:li:"


def extract_id(urn: Any) -> Optional[str]:
    """Return the ID of a given LinkedIn URN.

    Example: urn:li:fs_miniProfile:<id>
    """
    if not isinstance(urn, str):
        return None
    return urn.split(":")[-1]


def extract_update_urn(update: Any) -> Optional[str]:
    """Return the URN of a raw feed update.

    Example: urn:li:fs_updateV2:(<urn>,GROUP_FEED,EMPTY,DEFAULT,false)
    """
    if not isinstance(update, str) or "(" not in update:
        return None
    inner = update.split("(", 1)[1]
    return inner.split(",")[0].strip()


def is_valid_urn(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return value.startswith(URN_PREFIX) and len(value.split(":")) >= 4


def extract_urn_type(urn: Any) -> Optional[str]:
    """urn:li:fsd_company:42 -> 'fsd_company'"""
    if not is_valid_urn(urn):
        return None
    return urn.split(":")[2]
