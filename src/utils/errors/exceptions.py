"""Exceções de domínio do bridge.

Hierarquia:
- ConfigurationError: material TLS ou credenciais ausentes/inválidos (fatal no boot)
- UpstreamTransportError: falha de rede/TLS/timeout ao falar com o Inter
- CallerInputError: request inválido do chamador, rejeitado antes do upstream
"""

from __future__ import annotations


class BridgeError(RuntimeError):
    """Base para todas as falhas conhecidas do bridge."""


class ConfigurationError(BridgeError):
    """Configuração obrigatória ausente ou inválida.

    Args:
        errors: Lista de problemas encontrados (sem valores sensíveis).
    """

    def __init__(self, errors: list[str] | str) -> None:
        self.errors = [errors] if isinstance(errors, str) else list(errors)
        details = "; ".join(self.errors)
        super().__init__(f"Configuração inválida: {details}")


class UpstreamTransportError(BridgeError):
    """Não foi possível obter resposta do upstream (DNS, conexão, TLS, timeout)."""

    def __init__(self, detail: str, method: str = "", path: str = "") -> None:
        super().__init__(detail)
        self.detail = detail
        self.method = method
        self.path = path


class CallerInputError(BridgeError):
    """Request do chamador inválido; nunca chega ao upstream."""

    status_code: int = 400
    error: str = "requisição inválida"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class MissingBearerTokenError(CallerInputError):
    """Header Authorization: Bearer ausente ou vazio."""

    status_code = 401
    error = "token de acesso ausente"


class MissingClientCredentialsError(CallerInputError):
    """client_id/client_secret não informados nem configurados."""

    error = "credenciais OAuth ausentes"


class InvalidPayloadError(CallerInputError):
    """Corpo da requisição não pôde ser decodificado."""

    error = "payload inválido"


class InvalidHeaderError(CallerInputError):
    """Header repassado ao upstream com valor não-ASCII."""

    error = "header inválido"
