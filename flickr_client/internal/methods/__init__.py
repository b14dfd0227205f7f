from .table import METHODS, lookup, get_method, iter_methods, validate
from .namespaces import Namespace, child_segments

__all__ = [
    "METHODS",
    "lookup",
    "get_method",
    "iter_methods",
    "validate",
    "Namespace",
    "child_segments",
]
