# solaredge_api/services/http_transport.py
"""HTTP capability the client depends on.

The client only needs ``execute(request) -> response``. Anything implementing
:class:`HttpTransport` can be injected; :class:`RequestsTransport` is the
default and is backed by a ``requests.Session``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Protocol

import requests


@dataclass
class HttpRequest:
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass
class HttpResponse:
    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    def header(self, name: str) -> Optional[str]:
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None


class HttpTransport(Protocol):
    def execute(self, request: HttpRequest) -> HttpResponse:
        ...


class RequestsTransport:
    """Transport backed by ``requests``. Exceptions propagate unchanged."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.session = session or requests.Session()
        self.timeout = timeout

    def execute(self, request: HttpRequest) -> HttpResponse:
        resp = self.session.request(
            request.method,
            request.url,
            headers=request.headers,
            data=request.body or None,
            timeout=self.timeout,
        )
        return HttpResponse(
            status=resp.status_code,
            headers=dict(resp.headers),
            body=resp.content,
        )
