from .extras import process_extras
from .factory import RequestFactory

__all__ = ["process_extras", "RequestFactory"]
