"""Cliente HTTP mTLS para o upstream.

Um único httpx.AsyncClient por processo, com pool keep-alive e timeout
fixo. Não há retry: qualquer falha de transporte vira
UpstreamTransportError e a decisão de repetir fica com o chamador.
"""

from __future__ import annotations

import logging
import ssl
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from app.infra.http.http_logging import log_upstream_call, log_upstream_failure
from utils.errors import UpstreamTransportError

if TYPE_CHECKING:
    from app.infra.tls import TlsIdentity
    from config.settings import InterSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    base_url: str
    timeout_seconds: float = 30.0
    max_connections: int = 50
    max_keepalive_connections: int = 10
    keepalive_expiry_seconds: float = 30.0


class MtlsHttpClient:
    """Cliente HTTP assíncrono autenticado por certificado de cliente.

    Seguro para uso concorrente: nada é mutado após a construção.

    Args:
        config: Base URL, timeout e limites do pool
        verify: SSLContext com a identidade do cliente (ou bool em testes)
        transport: Transport httpx alternativo (testes)
    """

    def __init__(
        self,
        config: HttpClientConfig,
        verify: ssl.SSLContext | bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            verify=verify,
            timeout=httpx.Timeout(config.timeout_seconds),
            limits=httpx.Limits(
                max_connections=config.max_connections,
                max_keepalive_connections=config.max_keepalive_connections,
                keepalive_expiry=config.keepalive_expiry_seconds,
            ),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def timeout_seconds(self) -> float:
        return self._config.timeout_seconds

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        json: Any = None,
        data: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa uma chamada ao upstream.

        Respostas com qualquer status são devolvidas sem reinterpretação.

        Raises:
            UpstreamTransportError: Se não houve resposta (rede, TLS, timeout)
                ou o request não pôde ser montado (header não-ASCII)
        """
        started_at = time.perf_counter()
        try:
            response = await self._client.request(
                method,
                path,
                headers=headers,
                json=json,
                data=data,
            )
        except (httpx.HTTPError, httpx.InvalidURL, ssl.SSLError, UnicodeEncodeError) as exc:
            elapsed_ms = (time.perf_counter() - started_at) * 1000
            log_upstream_failure(method, path, type(exc).__name__, elapsed_ms)
            raise UpstreamTransportError(
                describe_transport_error(exc, self._config.timeout_seconds),
                method=method,
                path=path,
            ) from exc

        elapsed_ms = (time.perf_counter() - started_at) * 1000
        log_upstream_call(method, path, response.status_code, elapsed_ms)
        return response

    async def aclose(self) -> None:
        """Fecha o pool de conexões."""
        await self._client.aclose()


def describe_transport_error(exc: Exception, timeout_seconds: float) -> str:
    """Mensagem legível (nunca vazia) para uma falha de transporte."""
    reason = str(exc).strip() or type(exc).__name__
    if isinstance(exc, httpx.TimeoutException):
        return f"tempo limite de {timeout_seconds:g}s excedido ao contatar o upstream"
    if isinstance(exc, httpx.ConnectError):
        return f"falha de conexão com o upstream: {reason}"
    return f"falha na chamada ao upstream ({type(exc).__name__}): {reason}"


def create_mtls_http_client(
    settings: InterSettings,
    identity: TlsIdentity,
) -> MtlsHttpClient:
    """Factory do cliente mTLS a partir das settings e da identidade TLS."""
    config = HttpClientConfig(
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
    )
    client = MtlsHttpClient(config, verify=identity.create_ssl_context())
    logger.info(
        "mtls_http_client_created",
        extra={"base_url": settings.base_url, "timeout_seconds": settings.timeout_seconds},
    )
    return client
