"""
Конфигурация клиента Flickr
"""

import os
from dataclasses import dataclass
from typing import Optional

import toml

from .internal.types.models import DEFAULT_HOST, ClientOptions

CONFIG_FILE = "flickr.toml"


@dataclass
class FlickrConfig:
    """Конфигурация подключения к Flickr API"""

    api_key: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None

    @classmethod
    def from_file(
        cls, config_path: str = CONFIG_FILE, search_dir: str = None
    ) -> Optional["FlickrConfig"]:
        """Загрузка конфигурации из файла"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_in_dir = os.path.join(search_dir, CONFIG_FILE)
            if os.path.exists(config_in_dir):
                config_path = config_in_dir

        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
            port = config_data.get("port")
            return cls(
                api_key=config_data.get("api_key"),
                host=config_data.get("host", DEFAULT_HOST),
                port=int(port) if port else None,
            )
        except (OSError, ValueError, TypeError):
            # toml.TomlDecodeError тоже ValueError
            return None

    def save_to_file(self, config_path: str = CONFIG_FILE) -> None:
        """Сохранение конфигурации в файл"""
        # toml не умеет сохранять None
        config_data = {
            key: value
            for key, value in {
                "api_key": self.api_key,
                "host": self.host,
                "port": self.port,
            }.items()
            if value is not None
        }

        with open(config_path, "w") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "FlickrConfig":
        """Объединение с аргументами командной строки"""
        return FlickrConfig(
            api_key=args.api_key or self.api_key,
            host=args.host or self.host,
            port=args.port or self.port,
        )

    def to_options(self) -> ClientOptions:
        return ClientOptions(host=self.host, port=self.port)
