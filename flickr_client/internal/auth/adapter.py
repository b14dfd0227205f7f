"""
Адаптер авторизации

Строка трактуется как API ключ, callable как готовый декоратор запроса
(например, подпись OAuth). Разрешается один раз при создании клиента.
"""

from typing import Callable, Union

from ..types.models import OutgoingRequest
from ...exc import MissingRequiredArgument

AuthDecorator = Callable[[OutgoingRequest], OutgoingRequest]


class ApiKeyAuth:
    """Добавляет api_key в query каждого запроса"""

    def __init__(self, api_key: str):
        self.api_key = api_key

    def __call__(self, request: OutgoingRequest) -> OutgoingRequest:
        return request.query(api_key=self.api_key)

    def __repr__(self) -> str:
        return f"ApiKeyAuth({self.api_key[:4]}...)"


def create_auth(auth: Union[str, AuthDecorator]) -> AuthDecorator:
    """Нормализация аргумента auth к декоратору запроса"""
    if isinstance(auth, str):
        return ApiKeyAuth(auth)

    if not callable(auth):
        raise MissingRequiredArgument("auth")

    return auth
