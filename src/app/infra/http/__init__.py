"""Cliente HTTP de saída (mTLS) para o upstream."""

from .client import (
    HttpClientConfig,
    MtlsHttpClient,
    create_mtls_http_client,
    describe_transport_error,
)

__all__ = [
    "HttpClientConfig",
    "MtlsHttpClient",
    "create_mtls_http_client",
    "describe_transport_error",
]
