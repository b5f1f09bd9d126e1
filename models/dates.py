from __future__ import annotations

from typing import Optional

from .base import LinkedInModel


class LIDate(LinkedInModel):
    """Partial date as LinkedIn sends it: no day precision."""

    year: Optional[int] = None
    month: Optional[int] = None
