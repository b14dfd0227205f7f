from typing import Any, Iterable

from ...exc import InvalidArgumentType


def _dedupe(values: Iterable[str]) -> str:
    # dict.fromkeys сохраняет порядок первого вхождения
    return ",".join(dict.fromkeys(str(value) for value in values))


def process_extras(extras: Any, name: str = "extras") -> str:
    """
    Дедупликация extras и сборка в строку через запятую.

    Принимает строку "a,b", список/кортеж или множество имен полей.

    Examples:
        >>> process_extras("tags,views,tags")
        'tags,views'
        >>> process_extras(["tags", "tags", "views"])
        'tags,views'

    Raises:
        InvalidArgumentType: если extras другого типа
    """
    if isinstance(extras, str):
        return _dedupe(extras.split(","))

    if isinstance(extras, (list, tuple)):
        return _dedupe(extras)

    if isinstance(extras, (set, frozenset)):
        return _dedupe(extras)

    raise InvalidArgumentType(name)
