import asyncio
import logging
from typing import Any, Optional

from aiohttp import ClientError, ClientSession, ClientTimeout, TCPConnector

from ..types.models import OutgoingRequest
from ..utils.query import serialize_query
from ...exc import SendRequestError

logger = logging.getLogger(__name__)


class AiohttpTransport:
    """Асинхронная отправка OutgoingRequest через aiohttp"""

    def __init__(
        self,
        timeout: int = 30,
        retries: int = 3,
        retry_delay: float = 0.5,
        max_connections: int = 100,
        max_connections_per_host: int = 10,
        session: Optional[ClientSession] = None,
    ):
        self._timeout = int(timeout) if timeout else 30
        self._retries = int(retries) if retries else 3
        self._retry_delay = retry_delay
        self._max_connections = max_connections
        self._max_connections_per_host = max_connections_per_host
        self._connector: Optional[TCPConnector] = None
        self._session = session
        # Внешнюю сессию закрывает тот, кто ее создал
        self._owns_session = session is None
        self._session_lock = asyncio.Lock()

    async def _ensure_session(self) -> ClientSession:
        if self._session is not None and not self._session.closed:
            return self._session

        async with self._session_lock:
            if self._session is not None and not self._session.closed:
                return self._session

            timeout = ClientTimeout(
                total=self._timeout, connect=10, sock_read=10, sock_connect=10
            )
            if self._connector is None or self._connector.closed:
                self._connector = TCPConnector(
                    limit=self._max_connections,
                    limit_per_host=self._max_connections_per_host,
                    ttl_dns_cache=30,
                    keepalive_timeout=60,
                )

            self._session = ClientSession(
                connector=self._connector,
                connector_owner=False,  # коннектор закрывается в close()
                timeout=timeout,
                trust_env=True,  # Использовать системные прокси
            )
            self._owns_session = True

        return self._session

    async def send(self, request: OutgoingRequest) -> Any:
        """
        Отправка запроса и разбор ответа парсером запроса.

        Все параметры передаются в query string, тело не отправляется.

        Raises:
            SendRequestError: сетевая ошибка после всех попыток или HTTP статус >= 400
            FlickrApiError: ответ API со stat=fail (из парсера)
        """
        params = serialize_query(request.params)
        _retries = self._retries
        session = await self._ensure_session()

        while True:
            try:
                logger.debug(f"Making {request.verb} request {request.method_name} to {request.url}")

                async with session.request(
                    request.verb,
                    request.url,
                    params=params,
                    headers=request.headers or None,
                ) as response:
                    status = response.status
                    text = await response.text()

                logger.debug(f"Response status: {status}")
                break

            except (ClientError, asyncio.TimeoutError) as exc:
                _retries -= 1
                logger.warning(f"Request failed (retries left: {_retries}): {exc}")

                if not _retries:
                    raise SendRequestError(
                        str(exc), url=request.url, status_code=503
                    ) from exc

                await asyncio.sleep(self._retry_delay)

        if status >= 400:
            raise SendRequestError(
                f"HTTP {status}", url=request.url, status_code=status, response_data=text
            )

        return request.parser(text) if request.parser else text

    async def close(self):
        """Закрытие транспорта и освобождение ресурсов"""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

        if self._connector and not self._connector.closed:
            await self._connector.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
