"""
Исключения клиента Flickr
"""


class FlickrError(Exception):
    """Базовое исключение клиента"""


class MissingRequiredArgument(FlickrError):
    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f'Missing required argument "{argument}"')


class InvalidArgumentType(FlickrError):
    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f'Invalid type for argument "{argument}"')


class UnknownMethod(FlickrError):
    def __init__(self, method: str):
        self.method = method
        super().__init__(f'Unknown REST method "{method}"')


class FlickrApiError(FlickrError):
    """Ответ API со stat=fail"""

    def __init__(self, code, message, response_data=None):
        self.code = code
        self.message = message
        self.response_data = response_data
        super().__init__(f"[{code}] {message}")


class SendRequestError(FlickrError):
    def __init__(self, message, url, status_code, response_data=None):
        self.message = message
        self.url = url
        self.status_code = status_code
        self.response_data = response_data
        super().__init__(f"[{status_code}] {url}: {message}")
