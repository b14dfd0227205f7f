import logging
import time
from typing import Any, Optional

import httpx

from ..types.models import OutgoingRequest
from ..utils.query import serialize_query
from ...exc import SendRequestError

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Синхронная отправка OutgoingRequest через httpx"""

    def __init__(
        self,
        timeout: int = 30,
        retries: int = 3,
        retry_delay: float = 0.5,
        client: Optional[httpx.Client] = None,
    ):
        self._retries = int(retries) if retries else 3
        self._retry_delay = retry_delay
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, trust_env=True)

    def send(self, request: OutgoingRequest) -> Any:
        """Отправка запроса, контракт как у AiohttpTransport.send"""
        params = serialize_query(request.params)
        _retries = self._retries

        while True:
            try:
                logger.debug(f"Making {request.verb} request {request.method_name} to {request.url}")
                response = self._client.request(
                    request.verb,
                    request.url,
                    params=params,
                    headers=request.headers or None,
                )
                logger.debug(f"Response status: {response.status_code}")
                break

            except httpx.TransportError as exc:
                _retries -= 1
                logger.warning(f"Request failed (retries left: {_retries}): {exc}")

                if not _retries:
                    raise SendRequestError(
                        str(exc), url=request.url, status_code=503
                    ) from exc

                time.sleep(self._retry_delay)

        if response.status_code >= 400:
            raise SendRequestError(
                f"HTTP {response.status_code}",
                url=request.url,
                status_code=response.status_code,
                response_data=response.text,
            )

        return request.parser(response.text) if request.parser else response.text

    def close(self):
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
