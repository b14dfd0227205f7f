"""Сериализация query параметров"""

import json
from datetime import date, datetime
from typing import Any, Dict, Mapping


def serialize_query_value(value: Any) -> Any:
    """Специальная сериализация для query параметров"""
    if isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, bool):
        # Boolean значения для query параметров должны быть строками
        return str(value).lower()
    elif isinstance(value, (list, tuple, set, frozenset)):
        # Flickr ожидает списки через запятую (photo_ids, tags и т.д.)
        return ",".join(str(serialize_query_value(item)) for item in value)
    elif hasattr(value, "model_dump"):
        return value.model_dump_json()
    elif isinstance(value, dict):
        # Вложенные структуры передаются одной JSON строкой
        return json.dumps(value, default=str)
    elif isinstance(value, (int, float)):
        return str(value)
    else:
        return value


def serialize_query(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Сериализация всех параметров запроса, None значения пропускаются"""
    return {
        key: serialize_query_value(value)
        for key, value in params.items()
        if value is not None
    }
