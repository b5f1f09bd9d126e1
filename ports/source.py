from __future__ import annotations

from typing import Any, Dict, Literal, Protocol


ResponseKind = Literal["company", "profile_experience", "position_group"]


class ResponseSourcePort(Protocol):
    """Transport collaborator: fetches one raw voyager response.

    A response is the decoded JSON body, {"data": {...}, "included": [...]}.
    """

    def fetch(self, kind: ResponseKind, identifier: str) -> Dict[str, Any]:
        ...
