# solaredge_api/services/encoding.py

from __future__ import annotations

import dataclasses
import urllib.parse
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic.alias_generators import to_camel

from solaredge_api.errors import ParameterEncodingError
from solaredge_api.models.timefmt import format_date, format_datetime

API_KEY_PARAM = "api_key"
API_KEY_HEADER = "X-API-Key"
API_KEY_LOCATIONS = ("query", "header")


def encode_path_segment(value: Any) -> str:
    """Percent-encode everything except ASCII letters and digits."""
    out = []
    for ch in str(value):
        if ch.isascii() and ch.isalnum():
            out.append(ch)
        else:
            out.extend(f"%{byte:02X}" for byte in ch.encode("utf-8"))
    return "".join(out)


def join_ids(ids: Iterable[int]) -> str:
    """Comma-join identifiers for the bulk endpoints."""
    parts = []
    for site_id in ids:
        if isinstance(site_id, bool) or not isinstance(site_id, int):
            raise ParameterEncodingError(f"Site id must be an integer, got {site_id!r}")
        parts.append(str(site_id))
    if not parts:
        raise ParameterEncodingError("At least one site id is required")
    return ",".join(parts)


def _encode_scalar(name: str, value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, date):
        return format_date(value)
    if isinstance(value, (int, str)):
        return str(value)
    raise ParameterEncodingError(f"Cannot encode parameter '{name}' of type {type(value).__name__}")


def _encode_value(name: str, value: Any) -> str:
    if isinstance(value, (list, tuple)):
        items = [_encode_scalar(name, item) for item in value]
        return ",".join(items)
    return _encode_scalar(name, value)


def encode_params(params: Any) -> List[Tuple[str, str]]:
    """Flatten a parameter dataclass into ordered ``(key, value)`` pairs."""
    if params is None:
        return []
    if not dataclasses.is_dataclass(params) or isinstance(params, type):
        raise ParameterEncodingError(f"Unsupported parameter object: {type(params).__name__}")

    pairs: List[Tuple[str, str]] = []
    for f in dataclasses.fields(params):
        value = getattr(params, f.name)
        if value is None:
            continue
        pairs.append((to_camel(f.name), _encode_value(f.name, value)))
    return pairs


def build_url(
    base_url: str,
    path: str,
    params: Any = None,
    *,
    api_key: str,
    api_key_location: str = "query",
) -> Tuple[str, Dict[str, str]]:
    """Return the absolute request URL and the headers to send with it."""
    if api_key_location not in API_KEY_LOCATIONS:
        raise ParameterEncodingError(f"Unsupported api_key_location '{api_key_location}'")

    if not path.startswith("/"):
        path = "/" + path

    pairs = encode_params(params)
    headers: Dict[str, str] = {}
    if api_key_location == "query":
        pairs.append((API_KEY_PARAM, api_key))
    else:
        headers[API_KEY_HEADER] = api_key

    url = f"{base_url.rstrip('/')}{path}"
    query = urllib.parse.urlencode(pairs, safe=",")
    if query:
        url = f"{url}?{query}"
    return url, headers


def redact_url(url: str, api_key: Optional[str]) -> str:
    if not api_key:
        return url
    return url.replace(urllib.parse.quote_plus(api_key, safe=","), "<hidden>")
