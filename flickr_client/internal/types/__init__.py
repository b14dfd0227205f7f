from .models import ClientOptions, MethodSpec, OutgoingRequest, DEFAULT_HOST, REST_PATH

__all__ = ["ClientOptions", "MethodSpec", "OutgoingRequest", "DEFAULT_HOST", "REST_PATH"]
