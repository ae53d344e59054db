"""Gateway de relay para a API do Banco Inter.

Traduz as operações expostas pelo bridge em chamadas mTLS ao upstream e
devolve status e corpo sem reinterpretação:
- issue_token: grant client_credentials (form-urlencoded)
- create_charge: criação de cobrança/boleto (JSON)
- fetch_charge_pdf: PDF do boleto (binário)

Erros de aplicação do upstream (4xx/5xx com corpo) são relayados como
resultado normal. Apenas falhas de transporte levantam exceção.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from utils.errors import (
    InvalidHeaderError,
    InvalidPayloadError,
    MissingBearerTokenError,
    MissingClientCredentialsError,
)

if TYPE_CHECKING:
    from app.protocols import UpstreamHttpClientProtocol, UpstreamResponseProtocol
    from config.settings import InterSettings

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"
JSON_MEDIA_TYPE = "application/json"

# Header do Inter para selecionar a conta corrente em credenciais multi-conta
ACCOUNT_HEADER = "x-conta-corrente"


@dataclass(frozen=True, slots=True)
class RelayResult:
    """Resposta do upstream pronta para ser devolvida ao chamador."""

    status_code: int
    content: bytes
    media_type: str | None = None


def require_bearer(authorization: str | None) -> str:
    """Valida o header Authorization e devolve no formato `Bearer <token>`.

    Raises:
        MissingBearerTokenError: Se ausente, sem esquema Bearer ou vazio.
        InvalidHeaderError: Token com caracteres não-ASCII.
    """
    if not authorization or not authorization.strip():
        raise MissingBearerTokenError("header Authorization: Bearer <token> é obrigatório")
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise MissingBearerTokenError("header Authorization deve usar o esquema Bearer")
    if not token.strip().isascii():
        raise InvalidHeaderError("header Authorization contém caracteres não-ASCII")
    return f"Bearer {token.strip()}"


def encode_path_segment(value: str) -> str:
    """Codifica um identificador para uso como um único segmento de path."""
    return quote(value, safe="")


class InterGateway:
    """Relay das operações do bridge para o upstream Inter.

    Recebe settings e cliente HTTP já construídos (injeção de dependência);
    não guarda estado mutável, então pode atender requests concorrentes.

    Args:
        settings: InterSettings imutável (paths, credenciais padrão, escopo)
        http_client: Cliente HTTP mTLS compartilhado
    """

    def __init__(
        self,
        settings: InterSettings,
        http_client: UpstreamHttpClientProtocol,
    ) -> None:
        self._settings = settings
        self._http = http_client

    async def issue_token(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        scope: str | None = None,
    ) -> RelayResult:
        """Solicita access token via client_credentials.

        Valores do chamador têm precedência; ausentes usam os configurados.

        Raises:
            MissingClientCredentialsError: Sem client_id/client_secret
            UpstreamTransportError: Falha de transporte
        """
        resolved_id = client_id or self._settings.client_id
        resolved_secret = client_secret or self._settings.client_secret
        if not resolved_id or not resolved_secret:
            raise MissingClientCredentialsError(
                "client_id e client_secret são obrigatórios (no corpo ou na configuração)"
            )

        form = {
            "grant_type": "client_credentials",
            "client_id": resolved_id,
            "client_secret": resolved_secret,
            "scope": scope or self._settings.default_scope,
        }
        logger.info(
            "token_requested",
            extra={
                "client_id_source": "caller" if client_id else "config",
                "scope": form["scope"],
            },
        )
        response = await self._http.request(
            "POST",
            self._settings.token_path,
            headers={"Content-Type": FORM_MEDIA_TYPE, "Accept": JSON_MEDIA_TYPE},
            data=form,
        )
        return _relay(response)

    async def create_charge(
        self,
        payload: Any,
        authorization: str | None,
        account: str | None = None,
    ) -> RelayResult:
        """Cria cobrança repassando o JSON do chamador sem alterações.

        Raises:
            MissingBearerTokenError: Sem bearer token (upstream não é chamado)
            InvalidHeaderError: Authorization ou conta com valor não-ASCII
            InvalidPayloadError: Payload não é um objeto JSON
            UpstreamTransportError: Falha de transporte
        """
        bearer = require_bearer(authorization)
        if not isinstance(payload, dict):
            raise InvalidPayloadError("corpo da cobrança deve ser um objeto JSON")

        headers = self._auth_headers(bearer, account)
        headers["Content-Type"] = JSON_MEDIA_TYPE
        headers["Accept"] = JSON_MEDIA_TYPE
        response = await self._http.request(
            "POST",
            self._settings.charges_path,
            headers=headers,
            json=payload,
        )
        return _relay(response)

    async def fetch_charge_pdf(
        self,
        charge_id: str,
        authorization: str | None,
        account: str | None = None,
    ) -> RelayResult:
        """Busca o PDF da cobrança.

        Se o upstream responder com content-type de PDF, o resultado sai com
        `application/pdf` e os bytes originais; caso contrário (ex: erro JSON)
        a resposta é relayada como veio.

        Raises:
            MissingBearerTokenError: Sem bearer token (upstream não é chamado)
            InvalidHeaderError: Authorization ou conta com valor não-ASCII
            InvalidPayloadError: Identificador vazio
            UpstreamTransportError: Falha de transporte
        """
        bearer = require_bearer(authorization)
        if not charge_id or not charge_id.strip():
            raise InvalidPayloadError("identificador da cobrança é obrigatório")

        headers = self._auth_headers(bearer, account)
        headers["Accept"] = f"{PDF_MEDIA_TYPE}, {JSON_MEDIA_TYPE}"
        path = self._settings.charge_pdf_path(encode_path_segment(charge_id))
        response = await self._http.request("GET", path, headers=headers)

        result = _relay(response)
        content_type = response.headers.get("content-type", "")
        if "pdf" in content_type.lower():
            return RelayResult(
                status_code=result.status_code,
                content=result.content,
                media_type=PDF_MEDIA_TYPE,
            )
        return result

    def config_presence(self) -> dict[str, bool]:
        """Presença (não valores) das configurações obrigatórias."""
        return self._settings.presence()

    async def aclose(self) -> None:
        await self._http.aclose()

    @staticmethod
    def _auth_headers(bearer: str, account: str | None) -> dict[str, str]:
        headers = {"Authorization": bearer}
        if account and account.strip():
            if not account.isascii():
                raise InvalidHeaderError(f"header {ACCOUNT_HEADER} contém caracteres não-ASCII")
            headers[ACCOUNT_HEADER] = account.strip()
        return headers


def _relay(response: UpstreamResponseProtocol) -> RelayResult:
    return RelayResult(
        status_code=response.status_code,
        content=response.content,
        media_type=response.headers.get("content-type"),
    )
