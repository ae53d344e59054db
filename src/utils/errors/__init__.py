"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    BridgeError,
    CallerInputError,
    ConfigurationError,
    InvalidHeaderError,
    InvalidPayloadError,
    MissingBearerTokenError,
    MissingClientCredentialsError,
    UpstreamTransportError,
)

__all__ = [
    "BridgeError",
    "CallerInputError",
    "ConfigurationError",
    "InvalidHeaderError",
    "InvalidPayloadError",
    "MissingBearerTokenError",
    "MissingClientCredentialsError",
    "UpstreamTransportError",
]
