from .client import FlickrClient
from .config import FlickrConfig
from .exc import (
    FlickrError,
    MissingRequiredArgument,
    InvalidArgumentType,
    UnknownMethod,
    FlickrApiError,
    SendRequestError,
)
from .internal.auth import ApiKeyAuth, create_auth
from .internal.request import RequestFactory, process_extras
from .internal.transport import AiohttpTransport, HttpxTransport
from .internal.types import ClientOptions, MethodSpec, OutgoingRequest

__all__ = [
    "FlickrClient",
    "FlickrConfig",
    "FlickrError",
    "MissingRequiredArgument",
    "InvalidArgumentType",
    "UnknownMethod",
    "FlickrApiError",
    "SendRequestError",
    "ApiKeyAuth",
    "create_auth",
    "RequestFactory",
    "process_extras",
    "AiohttpTransport",
    "HttpxTransport",
    "ClientOptions",
    "MethodSpec",
    "OutgoingRequest",
]
