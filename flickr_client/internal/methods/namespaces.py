"""
Доступ к методам через цепочку атрибутов: client.photos.geo.getLocation(...)

Имя метода собирается из атрибутов и разрешается по таблице методов
в момент вызова.
"""

from typing import Any, Callable, List, Tuple

from .table import METHODS
from ..types.models import OutgoingRequest
from ..utils.naming import join_method_name, normalize_method_name

Dispatch = Callable[..., OutgoingRequest]


def child_segments(prefix: str) -> List[str]:
    """Уникальные сегменты, следующие за prefix, в порядке таблицы"""
    normalized = normalize_method_name(prefix) + "."
    segments = {}
    for name in METHODS:
        if name.lower().startswith(normalized):
            segments.setdefault(name[len(normalized):].split(".", 1)[0], None)
    return list(segments)


class Namespace:
    def __init__(self, dispatch: Dispatch, parts: Tuple[str, ...]):
        self._dispatch = dispatch
        self._parts = parts

    @property
    def method_name(self) -> str:
        return join_method_name(list(self._parts))

    def __getattr__(self, name: str) -> "Namespace":
        if name.startswith("_"):
            raise AttributeError(name)
        return Namespace(self._dispatch, self._parts + (name,))

    def __call__(self, args=None, **kwargs: Any) -> OutgoingRequest:
        return self._dispatch(self.method_name, args, **kwargs)

    def __dir__(self) -> List[str]:
        return child_segments(self.method_name)

    def __repr__(self) -> str:
        return f"<Namespace {self.method_name}>"
