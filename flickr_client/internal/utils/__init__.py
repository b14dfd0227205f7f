"""Утилиты клиента"""

from .naming import (
    normalize_segment,
    normalize_method_name,
    join_method_name,
)
from .query import serialize_query_value, serialize_query

__all__ = [
    "normalize_segment",
    "normalize_method_name",
    "join_method_name",
    "serialize_query_value",
    "serialize_query",
]
