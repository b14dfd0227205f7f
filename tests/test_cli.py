"""
Тесты командной строки
"""

import json

import httpx
import pytest
from flickr_client import cli
from flickr_client.config import FlickrConfig
from flickr_client.internal.transport.httpx_transport import HttpxTransport


@pytest.fixture
def captured(monkeypatch):
    """Подмена транспорта CLI на MockTransport"""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, text=json.dumps({"stat": "ok"}))

    def make_transport():
        client = httpx.Client(transport=httpx.MockTransport(handler))
        return HttpxTransport(client=client)

    monkeypatch.setattr(cli, "HttpxTransport", make_transport)
    return requests


class TestCli:
    """Тесты команды flickr-client"""

    def test_parse_method_args(self):
        """Тест разбора key=value"""
        assert cli.parse_method_args(["a=1", "text=x=y"]) == {"a": "1", "text": "x=y"}

        with pytest.raises(ValueError):
            cli.parse_method_args(["broken"])

    def test_list(self, capsys):
        """Тест вывода списка методов"""
        cli.main(["--list", "flickr.test."])

        out = capsys.readouterr().out
        assert "flickr.test.echo" in out
        assert "flickr.testimonials" not in out

    def test_call_method(self, tmp_path, monkeypatch, captured, capsys):
        """Тест вызова метода с сохранением конфига"""
        monkeypatch.chdir(tmp_path)

        cli.main(
            [
                "--method",
                "flickr.photos.getInfo",
                "--arg",
                "photo_id=42",
                "--api-key",
                "KEY123",
                "--force",
            ]
        )

        params = captured[0].url.params
        assert params["method"] == "flickr.photos.getInfo"
        assert params["photo_id"] == "42"
        assert params["api_key"] == "KEY123"
        assert '"stat": "ok"' in capsys.readouterr().out
        assert FlickrConfig.from_file(str(tmp_path / "flickr.toml")).api_key == "KEY123"

    def test_missing_required_argument(self, tmp_path, monkeypatch, captured):
        """Тест ошибки обязательного аргумента"""
        monkeypatch.chdir(tmp_path)

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--method", "flickr.photos.getInfo", "--api-key", "KEY123"])

        assert exc_info.value.code == 1
        assert captured == []

    def test_missing_api_key(self, tmp_path, monkeypatch):
        """Тест отсутствия API ключа"""
        monkeypatch.chdir(tmp_path)

        with pytest.raises(SystemExit):
            cli.main(["--method", "flickr.test.echo"])

    def test_init_config(self, tmp_path, monkeypatch):
        """Тест создания конфига"""
        monkeypatch.chdir(tmp_path)

        cli.main(["--init-config", "--api-key", "KEY123", "--port", "8443"])

        config = FlickrConfig.from_file(str(tmp_path / "flickr.toml"))
        assert config.api_key == "KEY123"
        assert config.port == 8443

    def test_broken_config_port(self, tmp_path, monkeypatch, capsys):
        """Тест что конфиг с неверным портом не роняет команду"""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "flickr.toml").write_text('port = "abc"\n')

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--method", "flickr.test.echo"])

        assert exc_info.value.code == 1
        assert "API ключ не указан" in capsys.readouterr().out
