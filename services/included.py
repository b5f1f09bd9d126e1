from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from services.urns import extract_urn_type


def find_by_urn(included: Optional[Iterable[Any]], urn: Optional[str]) -> Optional[Dict[str, Any]]:
    """First side-table entity whose entityUrn equals `urn`."""
    if not urn:
        return None
    for entity in included or []:
        if isinstance(entity, dict) and entity.get("entityUrn") == urn:
            return entity
    return None


def find_by_urn_suffix(included: Optional[Iterable[Any]], suffix: Optional[str]) -> Optional[Dict[str, Any]]:
    """First side-table entity whose entityUrn ends with `suffix`.

    The component payloads and the side-table do not always agree on the URN
    prefix (fs_ vs fsd_), so only the trailing id is compared.
    """
    if not suffix:
        return None
    for entity in included or []:
        if not isinstance(entity, dict):
            continue
        urn = entity.get("entityUrn")
        if isinstance(urn, str) and urn.endswith(suffix):
            return entity
    return None


def filter_by_urn_type(included: Optional[Iterable[Any]], urn_type: str) -> List[Dict[str, Any]]:
    return [
        entity
        for entity in included or []
        if isinstance(entity, dict) and extract_urn_type(entity.get("entityUrn")) == urn_type
    ]
