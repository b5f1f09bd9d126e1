from .source import ResponseKind, ResponseSourcePort

__all__ = [
    "ResponseKind",
    "ResponseSourcePort",
]
