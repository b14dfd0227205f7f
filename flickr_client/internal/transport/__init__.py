from .aiohttp_transport import AiohttpTransport
from .httpx_transport import HttpxTransport

__all__ = ["AiohttpTransport", "HttpxTransport"]
