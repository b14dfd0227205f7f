"""
Тесты транспортов без сети
"""

import json

import aiohttp
import httpx
import pytest
from flickr_client import FlickrClient
from flickr_client.exc import FlickrApiError, SendRequestError
from flickr_client.internal.transport.aiohttp_transport import AiohttpTransport
from flickr_client.internal.transport.httpx_transport import HttpxTransport

OK_BODY = json.dumps({"stat": "ok", "photo": {"id": "1"}})


class FakeResponse:
    def __init__(self, status: int, text: str):
        self.status = status
        self._text = text

    async def text(self):
        return self._text

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    """Подмена aiohttp.ClientSession, отдающая заготовленные ответы"""

    closed = False

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def flickr():
    return FlickrClient("KEY123")


class TestAiohttpTransport:
    """Тесты асинхронного транспорта"""

    @pytest.mark.asyncio
    async def test_send_parses_json(self, flickr):
        """Тест отправки и разбора ответа"""
        session = FakeSession(FakeResponse(200, OK_BODY))
        transport = AiohttpTransport(session=session)

        data = await transport.send(flickr.photos.getInfo(photo_id=1))

        assert data["photo"]["id"] == "1"
        method, url, kwargs = session.calls[0]
        assert method == "GET"
        assert url == "https://api.flickr.com/services/rest"
        assert kwargs["params"]["method"] == "flickr.photos.getInfo"
        assert kwargs["params"]["photo_id"] == "1"
        assert kwargs["params"]["api_key"] == "KEY123"

    @pytest.mark.asyncio
    async def test_post_sends_query(self, flickr):
        """Тест что POST отправляет параметры в query"""
        session = FakeSession(FakeResponse(200, OK_BODY))
        transport = AiohttpTransport(session=session)

        await transport.send(flickr.favorites.add(photo_id=5))

        method, _, kwargs = session.calls[0]
        assert method == "POST"
        assert kwargs["params"]["photo_id"] == "5"
        assert "data" not in kwargs and "json" not in kwargs

    @pytest.mark.asyncio
    async def test_api_error(self, flickr):
        """Тест ответа со stat=fail"""
        body = json.dumps({"stat": "fail", "code": 1, "message": "Photo not found"})
        transport = AiohttpTransport(session=FakeSession(FakeResponse(200, body)))

        with pytest.raises(FlickrApiError) as exc_info:
            await transport.send(flickr.photos.getInfo(photo_id=1))

        assert exc_info.value.code == 1

    @pytest.mark.asyncio
    async def test_http_error(self, flickr):
        """Тест HTTP статуса ошибки"""
        transport = AiohttpTransport(session=FakeSession(FakeResponse(502, "bad")))

        with pytest.raises(SendRequestError) as exc_info:
            await transport.send(flickr.test.echo())

        assert exc_info.value.status_code == 502
        assert exc_info.value.response_data == "bad"

    @pytest.mark.asyncio
    async def test_retry_then_success(self, flickr):
        """Тест повтора после сетевой ошибки"""
        session = FakeSession(
            aiohttp.ClientConnectionError("reset"), FakeResponse(200, OK_BODY)
        )
        transport = AiohttpTransport(session=session, retry_delay=0)

        data = await transport.send(flickr.test.echo())

        assert data["stat"] == "ok"
        assert len(session.calls) == 2

    @pytest.mark.asyncio
    async def test_retries_exhausted(self, flickr):
        """Тест исчерпания попыток"""
        session = FakeSession(*[aiohttp.ClientConnectionError("down")] * 3)
        transport = AiohttpTransport(session=session, retries=3, retry_delay=0)

        with pytest.raises(SendRequestError) as exc_info:
            await transport.send(flickr.test.echo())

        assert exc_info.value.status_code == 503
        assert len(session.calls) == 3

    @pytest.mark.asyncio
    async def test_external_session_not_closed(self):
        """Тест что внешняя сессия не закрывается транспортом"""
        session = FakeSession()

        async with AiohttpTransport(session=session):
            pass

        assert session.closed is False

    @pytest.mark.asyncio
    async def test_close_releases_connector(self):
        """Тест что close() закрывает собственные сессию и коннектор"""
        transport = AiohttpTransport()
        session = await transport._ensure_session()

        await transport.close()

        assert session.closed
        assert transport._connector.closed


class TestHttpxTransport:
    """Тесты синхронного транспорта"""

    def make_transport(self, handler, **kwargs) -> HttpxTransport:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        return HttpxTransport(client=client, retry_delay=0, **kwargs)

    def test_send(self, flickr):
        """Тест отправки запроса"""
        captured = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, text=OK_BODY)

        with self.make_transport(handler) as transport:
            data = transport.send(
                flickr.photos.search(text="doggo", extras=["tags", "tags"], safe=True)
            )

        assert data["stat"] == "ok"
        params = captured[0].url.params
        assert captured[0].url.host == "api.flickr.com"
        assert captured[0].url.path == "/services/rest"
        assert params["method"] == "flickr.photos.search"
        assert params["extras"] == "tags"
        assert params["safe"] == "true"
        assert params["format"] == "json"
        assert params["nojsoncallback"] == "1"

    def test_post_without_body(self, flickr):
        """Тест что POST уходит без тела"""
        captured = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, text=OK_BODY)

        with self.make_transport(handler) as transport:
            transport.send(flickr.photosets.removePhotos(photoset_id=1, photo_ids=[2, 3]))

        assert captured[0].method == "POST"
        assert captured[0].content == b""
        assert captured[0].url.params["photo_ids"] == "2,3"

    def test_headers_forwarded(self):
        """Тест передачи заголовков от декоратора авторизации"""
        captured = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, text=OK_BODY)

        flickr = FlickrClient(lambda request: request.set_header("Authorization", "OAuth x"))

        with self.make_transport(handler) as transport:
            transport.send(flickr.test.login())

        assert captured[0].headers["Authorization"] == "OAuth x"

    def test_http_error(self, flickr):
        """Тест HTTP статуса ошибки"""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="oops")

        with self.make_transport(handler) as transport:
            with pytest.raises(SendRequestError) as exc_info:
                transport.send(flickr.test.echo())

        assert exc_info.value.status_code == 500

    def test_retries_exhausted(self, flickr):
        """Тест исчерпания попыток"""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("down", request=request)

        with self.make_transport(handler, retries=2) as transport:
            with pytest.raises(SendRequestError) as exc_info:
                transport.send(flickr.test.echo())

        assert exc_info.value.status_code == 503
        assert len(calls) == 2
