"""Tradução de resultados e erros do gateway para respostas HTTP."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from fastapi import Request
from fastapi.responses import JSONResponse, Response

from utils.errors import CallerInputError, InvalidPayloadError

if TYPE_CHECKING:
    from app.services import InterGateway, RelayResult
    from utils.errors import UpstreamTransportError

BRIDGE_ERROR = "erro interno no bridge"


def relay_response(result: RelayResult) -> Response:
    """Devolve status, corpo e content-type do upstream sem reinterpretação."""
    headers = {"content-type": result.media_type} if result.media_type else None
    return Response(
        content=result.content,
        status_code=result.status_code,
        headers=headers,
    )


def transport_error_response(exc: UpstreamTransportError) -> JSONResponse:
    """Falha de transporte: resposta uniforme de bridge (502)."""
    return JSONResponse(
        {"error": BRIDGE_ERROR, "detail": exc.detail},
        status_code=502,
    )


def caller_error_response(exc: CallerInputError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        {"error": exc.error, "detail": exc.detail},
        status_code=exc.status_code,
        headers=headers,
    )


def gateway_unavailable_response() -> JSONResponse:
    return JSONResponse(
        {"error": BRIDGE_ERROR, "detail": "gateway não inicializado"},
        status_code=503,
    )


def get_gateway(request: Request) -> InterGateway | None:
    return getattr(request.app.state, "gateway", None)


async def read_json_body(request: Request) -> Any:
    """Decodifica o corpo JSON do request.

    Raises:
        InvalidPayloadError: Corpo vazio ou JSON inválido.
    """
    raw_body = await request.body()
    if not raw_body.strip():
        raise InvalidPayloadError("corpo JSON é obrigatório")
    try:
        return decode_json(raw_body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidPayloadError("corpo não é JSON válido") from exc


def decode_json(raw: bytes) -> Any:
    """json.loads estrito: NaN e Infinity não são JSON e não podem ser reenviados.

    Raises:
        InvalidPayloadError: Constante não-JSON no corpo.
        json.JSONDecodeError: Corpo malformado.
    """
    return json.loads(raw, parse_constant=_reject_constant)


def _reject_constant(name: str) -> Any:
    raise InvalidPayloadError(f"valor {name} não é permitido em JSON")
