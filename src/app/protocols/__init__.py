"""Protocolos e contratos do core da aplicação."""

from .http_client import UpstreamHttpClientProtocol, UpstreamResponseProtocol

__all__ = [
    "UpstreamHttpClientProtocol",
    "UpstreamResponseProtocol",
]
