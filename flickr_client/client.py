"""
Клиент Flickr REST API - чистый интерфейс
"""

from typing import Any, Mapping, Optional, Union

from .internal.auth.adapter import AuthDecorator, create_auth
from .internal.methods.namespaces import Namespace, child_segments
from .internal.methods.table import get_method, validate
from .internal.request.factory import RequestFactory
from .internal.types.models import DEFAULT_HOST, ClientOptions, OutgoingRequest
from .internal.utils.naming import METHOD_PREFIX


class FlickrClient:
    """
    Клиент Flickr REST API.

    Методы API доступны через цепочку атрибутов и возвращают собранный
    OutgoingRequest, который отправляется транспортом:

        flickr = FlickrClient("API_KEY")
        request = flickr.photos.getInfo(photo_id=25825763)

        async with AiohttpTransport() as transport:
            data = await transport.send(request)

    Для методов с авторизацией вместо ключа передается декоратор запроса,
    добавляющий подпись.
    """

    def __init__(
        self,
        auth: Union[str, AuthDecorator],
        host: str = DEFAULT_HOST,
        port: Optional[int] = None,
    ):
        self._options = ClientOptions(host=host, port=port)
        self._factory = RequestFactory(create_auth(auth), self._options)

    @classmethod
    def from_options(
        cls, auth: Union[str, AuthDecorator], options: ClientOptions
    ) -> "FlickrClient":
        return cls(auth, host=options.host, port=options.port)

    @property
    def options(self) -> ClientOptions:
        return self._options

    def request(
        self,
        verb: str,
        method_name: str,
        args: Optional[Mapping[str, Any]] = None,
    ) -> OutgoingRequest:
        """Запрос к произвольному методу, в том числе отсутствующему в таблице"""
        return self._factory.build(verb, method_name, args)

    def call(
        self,
        method_name: str,
        args: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> OutgoingRequest:
        """Вызов метода из таблицы с проверкой обязательных аргументов"""
        spec = get_method(method_name)
        merged = {**(args or {}), **kwargs}
        validate(merged, spec.required)
        return self._factory.build(spec.verb, spec.name, merged)

    def __getattr__(self, name: str) -> Namespace:
        if name.startswith("_"):
            raise AttributeError(name)
        return Namespace(self.call, (name,))

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(child_segments(METHOD_PREFIX)))

    def __repr__(self) -> str:
        return f"FlickrClient(base_url={self._options.base_url!r})"
