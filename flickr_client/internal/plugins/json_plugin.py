"""
Декоратор ответа в формате JSON

Flickr по умолчанию отвечает XML; format=json и nojsoncallback=1
переключают его на чистый JSON без JSONP обертки.
"""

import json
import logging
from typing import Any, Dict

from ..types.models import OutgoingRequest
from ...exc import FlickrApiError

logger = logging.getLogger(__name__)


def parse_envelope(text: str) -> Dict[str, Any]:
    """Разбор JSON конверта Flickr ({"stat": "ok"|"fail", ...})"""
    data = json.loads(text)

    if isinstance(data, dict) and data.get("stat") == "fail":
        logger.debug(f"API error {data.get('code')}: {data.get('message')}")
        raise FlickrApiError(data.get("code"), data.get("message"), response_data=data)

    return data


def json_response(request: OutgoingRequest) -> OutgoingRequest:
    request.query(format="json", nojsoncallback=1)
    request.parser = parse_envelope
    return request
