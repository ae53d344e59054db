"""Settings específicas do Banco Inter.

Credenciais do cliente OAuth, material TLS (mTLS) e endpoints do upstream.
Os valores de certificado e chave chegam em base64 via variáveis de ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

INTER_BASE_URL: str = "https://cdpj.partners.bancointer.com.br"
INTER_TOKEN_PATH: str = "/oauth/v2/token"
INTER_CHARGES_PATH: str = "/api/v2/cobrancas"
INTER_DEFAULT_SCOPE: str = "boleto-cobranca.read boleto-cobranca.write"
INTER_TIMEOUT_SECONDS: float = 30.0


@dataclass(frozen=True)
class InterSettings:
    """Configurações do upstream Inter.

    Attributes:
        base_url: URL base da API (sem barra final)
        cert_b64: Certificado PEM codificado em base64
        key_b64: Chave privada PEM codificada em base64
        client_id: client_id OAuth usado quando o chamador não informa
        client_secret: client_secret OAuth usado quando o chamador não informa
        default_scope: Escopo usado quando o chamador não informa
        token_path: Path do endpoint de token
        charges_path: Path do endpoint de cobranças
        timeout_seconds: Timeout fixo por chamada ao upstream
    """

    base_url: str = INTER_BASE_URL

    # Credenciais (nunca logar)
    cert_b64: str = field(default="", repr=False)
    key_b64: str = field(default="", repr=False)
    client_id: str = ""
    client_secret: str = field(default="", repr=False)

    default_scope: str = INTER_DEFAULT_SCOPE
    token_path: str = INTER_TOKEN_PATH
    charges_path: str = INTER_CHARGES_PATH
    timeout_seconds: float = INTER_TIMEOUT_SECONDS

    def charge_pdf_path(self, encoded_charge_id: str) -> str:
        """Retorna path do PDF de uma cobrança.

        Args:
            encoded_charge_id: Identificador já codificado para URL.
        """
        return f"{self.charges_path}/{encoded_charge_id}/pdf"

    def presence(self) -> dict[str, bool]:
        """Indica quais valores obrigatórios estão presentes (sem expor valores)."""
        return {
            "base_url": bool(self.base_url),
            "cert": bool(self.cert_b64),
            "key": bool(self.key_b64),
            "client_id": bool(self.client_id),
            "client_secret": bool(self.client_secret),
        }

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Inter.

        A decodificação do material TLS é validada em app.infra.tls.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.base_url.startswith("https://"):
            errors.append("INTER_BASE_URL deve usar https://")

        if not self.cert_b64:
            errors.append("INTER_CERT_B64 não configurado")

        if not self.key_b64:
            errors.append("INTER_KEY_B64 não configurado")

        if not self.client_id:
            errors.append("INTER_CLIENT_ID não configurado")

        if not self.client_secret:
            errors.append("INTER_CLIENT_SECRET não configurado")

        if self.timeout_seconds <= 0:
            errors.append("INTER_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> InterSettings:
    """Carrega InterSettings a partir de variáveis de ambiente."""
    return InterSettings(
        base_url=os.getenv("INTER_BASE_URL", INTER_BASE_URL).rstrip("/"),
        cert_b64=os.getenv("INTER_CERT_B64", ""),
        key_b64=os.getenv("INTER_KEY_B64", ""),
        client_id=os.getenv("INTER_CLIENT_ID", ""),
        client_secret=os.getenv("INTER_CLIENT_SECRET", ""),
        default_scope=os.getenv("INTER_DEFAULT_SCOPE", INTER_DEFAULT_SCOPE),
        token_path=os.getenv("INTER_TOKEN_PATH", INTER_TOKEN_PATH),
        charges_path=os.getenv("INTER_CHARGES_PATH", INTER_CHARGES_PATH).rstrip("/"),
        timeout_seconds=float(
            os.getenv("INTER_TIMEOUT_SECONDS", str(INTER_TIMEOUT_SECONDS))
        ),
    )


@lru_cache(maxsize=1)
def get_inter_settings() -> InterSettings:
    """Retorna instância cacheada de InterSettings."""
    return _load_from_env()
