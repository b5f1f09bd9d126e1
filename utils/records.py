from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union


PathKey = Union[str, int]


def omit(record: Mapping[str, Any], *keys: str) -> Dict[str, Any]:
    """Return a shallow copy of `record` without `keys`.

    omit({"a": 1, "b": 2, "c": 3}, "a", "c") -> {"b": 2}
    """
    drop = set(keys)
    return {k: v for k, v in record.items() if k not in drop}


def dig(data: Any, *path: PathKey, default: Any = None) -> Any:
    """Safely walk nested dicts (str keys) and lists (int indices).

    Any missing key, out-of-range index, None or wrong-shape node along the
    way yields `default`.
    """
    current = data
    for key in path:
        if isinstance(key, int) and not isinstance(key, bool):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return default
            current = current[key]
        else:
            if not isinstance(current, Mapping):
                return default
            current = current.get(key)
        if current is None:
            return default
    return current


def dig_str(data: Any, *path: PathKey) -> Optional[str]:
    """Like dig(), but only returns str values."""
    value = dig(data, *path)
    return value if isinstance(value, str) else None


def as_mapping(value: Any) -> Dict[str, Any]:
    if isinstance(value, Mapping):
        return dict(value)
    return {}
