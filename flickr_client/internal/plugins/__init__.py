from .json_plugin import json_response, parse_envelope

__all__ = ["json_response", "parse_envelope"]
