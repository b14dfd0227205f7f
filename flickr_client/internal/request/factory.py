import logging
from typing import Any, Mapping, Optional

from ..auth.adapter import AuthDecorator
from ..plugins.json_plugin import json_response
from ..types.models import ClientOptions, OutgoingRequest
from .extras import process_extras
from ...exc import InvalidArgumentType

logger = logging.getLogger(__name__)


class RequestFactory:
    """
    Фабрика запросов к Flickr REST API.

    Хранит только неизменяемые настройки и декоратор авторизации, поэтому
    один экземпляр можно использовать из разных потоков и задач.
    """

    def __init__(self, auth: AuthDecorator, options: Optional[ClientOptions] = None):
        self.auth = auth
        self.options = options or ClientOptions()

    def build(
        self,
        verb: str,
        method_name: str,
        args: Optional[Mapping[str, Any]] = None,
    ) -> OutgoingRequest:
        """
        Сборка запроса без отправки.

        Все аргументы уходят в query string независимо от HTTP метода,
        включая POST. Авторизация применяется последней, чтобы подписывать
        полный набор параметров.

        Args:
            verb: HTTP метод (GET, POST)
            method_name: полное имя метода, например "flickr.photos.getInfo"
            args: аргументы метода

        Raises:
            InvalidArgumentType: пустое имя метода или неверный тип extras
        """
        if not isinstance(method_name, str) or not method_name:
            raise InvalidArgumentType("method")

        args = dict(args) if args else {}
        # method всегда равен имени вызываемого метода
        args.pop("method", None)

        if args.get("extras"):
            args["extras"] = process_extras(args["extras"])

        logger.debug(f"Building {verb} request for {method_name}")

        request = OutgoingRequest(verb=verb, url=self.options.base_url)

        return (
            request.query(method=method_name)
            .query(args)
            .use(json_response)
            .use(self.auth)
        )

    __call__ = build
