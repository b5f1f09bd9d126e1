from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from models.dates import LIDate


def stringify_date(date: Union[LIDate, Mapping[str, Any], None]) -> Optional[str]:
    """Render a partial date as 'YYYY' or 'YYYY-M'.

    A month of 0 is treated like a missing month.
    """
    if date is None:
        return None
    if isinstance(date, Mapping):
        year, month = date.get("year"), date.get("month")
    else:
        year, month = date.year, date.month
    if year is None:
        return None
    if month:
        return f"{year}-{month}"
    return str(year)
