# solaredge_api/errors.py
"""Exceptions raised by the SolarEdge API client."""

from __future__ import annotations


class SolarEdgeError(Exception):
    """Base exception for the SolarEdge API client."""


class ParameterEncodingError(SolarEdgeError):
    """Request parameters could not be serialized; nothing was sent."""


class TransportError(SolarEdgeError):
    """The HTTP transport failed. The original exception is ``__cause__``."""


class ApiError(SolarEdgeError):
    """The API answered with a 4xx/5xx status."""

    def __init__(self, status: int, body: bytes):
        self.status = status
        self.body = body
        super().__init__(f"SolarEdge HTTP API error: {status}")

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class DecodeError(SolarEdgeError):
    """The response body did not match the expected JSON shape."""
