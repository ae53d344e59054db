"""Endpoints de cobrança (boleto): criação e PDF."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import Response

from api.routes.inter.responses import (
    caller_error_response,
    gateway_unavailable_response,
    get_gateway,
    read_json_body,
    relay_response,
    transport_error_response,
)
from app.services import require_bearer
from app.services.inter_gateway import ACCOUNT_HEADER
from utils.errors import CallerInputError, UpstreamTransportError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/cobrancas")
async def create_charge(request: Request) -> Response:
    """Cria cobrança no upstream com o JSON recebido."""
    gateway = get_gateway(request)
    if gateway is None:
        return gateway_unavailable_response()

    authorization = request.headers.get("authorization")
    try:
        # Bearer antes do corpo: request sem token nunca é processado
        require_bearer(authorization)
        payload = await read_json_body(request)
        result = await gateway.create_charge(
            payload,
            authorization,
            account=request.headers.get(ACCOUNT_HEADER),
        )
    except CallerInputError as exc:
        logger.warning(
            "charge_request_rejected",
            extra={"route": "/cobrancas", "reason": type(exc).__name__},
        )
        return caller_error_response(exc)
    except UpstreamTransportError as exc:
        return transport_error_response(exc)

    return relay_response(result)


@router.get("/cobrancas/{charge_id:path}/pdf")
async def fetch_charge_pdf(charge_id: str, request: Request) -> Response:
    """Devolve o PDF do boleto (ou o erro do upstream, inalterado).

    O converter `path` aceita identificadores com `/` codificado (%2F).
    """
    gateway = get_gateway(request)
    if gateway is None:
        return gateway_unavailable_response()

    try:
        result = await gateway.fetch_charge_pdf(
            charge_id,
            request.headers.get("authorization"),
            account=request.headers.get(ACCOUNT_HEADER),
        )
    except CallerInputError as exc:
        logger.warning(
            "charge_pdf_request_rejected",
            extra={"route": "/cobrancas/{id}/pdf", "reason": type(exc).__name__},
        )
        return caller_error_response(exc)
    except UpstreamTransportError as exc:
        return transport_error_response(exc)

    return relay_response(result)
