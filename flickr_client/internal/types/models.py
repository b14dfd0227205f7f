from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_HOST = "api.flickr.com"
REST_PATH = "/services/rest"


class ClientOptions(BaseModel):
    """Настройки подключения, неизменяемые после создания клиента"""

    model_config = ConfigDict(frozen=True)

    host: str = DEFAULT_HOST
    port: Optional[int] = None

    @field_validator("host", mode="before")
    def host_check(cls, value):
        # Пустой host означает host по умолчанию
        return value or DEFAULT_HOST

    @field_validator("port", mode="before")
    def port_check(cls, value):
        return value or None

    @property
    def netloc(self) -> str:
        return f"{self.host}:{self.port}" if self.port else self.host

    @property
    def base_url(self) -> str:
        return f"https://{self.netloc}{REST_PATH}"


class MethodSpec(BaseModel):
    """Описание метода REST API из таблицы методов"""

    model_config = ConfigDict(frozen=True)

    name: str
    verb: str
    required: Tuple[str, ...] = ()

    @property
    def namespace(self) -> str:
        return self.name.rsplit(".", 1)[0]


class OutgoingRequest(BaseModel):
    """
    Собранный, но не отправленный HTTP запрос.

    Декораторы (авторизация, парсинг ответа) применяются через use() и
    модифицируют запрос на месте.
    """

    verb: str
    url: str
    params: Dict[str, Any] = Field(default_factory=dict)
    headers: Dict[str, str] = Field(default_factory=dict)
    parser: Optional[Callable[[str], Any]] = None

    def query(self, params: Optional[Mapping[str, Any]] = None, **kwargs) -> "OutgoingRequest":
        """Добавление query параметров"""
        if params:
            self.params.update(params)
        self.params.update(kwargs)
        return self

    def set_header(self, name: str, value: str) -> "OutgoingRequest":
        self.headers[name] = value
        return self

    def use(
        self, decorator: Callable[["OutgoingRequest"], "OutgoingRequest"]
    ) -> "OutgoingRequest":
        """Применение декоратора запроса"""
        result = decorator(self)
        return self if result is None else result

    @property
    def method_name(self) -> Optional[str]:
        return self.params.get("method")
