"""Endpoint de emissão de token OAuth (client_credentials)."""

from __future__ import annotations

import json
import logging
from urllib.parse import parse_qsl

from fastapi import APIRouter, Request
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, ValidationError

from api.routes.inter.responses import (
    caller_error_response,
    decode_json,
    gateway_unavailable_response,
    get_gateway,
    relay_response,
    transport_error_response,
)
from utils.errors import CallerInputError, InvalidPayloadError, UpstreamTransportError

logger = logging.getLogger(__name__)

router = APIRouter()


class TokenRequest(BaseModel):
    """Corpo aceito em /oauth/token; campos ausentes usam a configuração."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    client_id: str | None = None
    client_secret: str | None = None
    scope: str | None = None


async def read_token_request(request: Request) -> TokenRequest:
    """Lê o corpo como JSON ou form-urlencoded.

    Raises:
        InvalidPayloadError: Corpo malformado.
    """
    raw_body = await request.body()
    if not raw_body.strip():
        return TokenRequest()

    content_type = request.headers.get("content-type", "").lower()
    try:
        if "application/x-www-form-urlencoded" in content_type:
            fields: object = dict(parse_qsl(raw_body.decode("utf-8")))
        else:
            fields = decode_json(raw_body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidPayloadError("corpo do pedido de token é inválido") from exc

    if not isinstance(fields, dict):
        raise InvalidPayloadError("corpo do pedido de token deve ser um objeto")
    try:
        return TokenRequest.model_validate(fields)
    except ValidationError as exc:
        raise InvalidPayloadError("campos do pedido de token devem ser strings") from exc


@router.post("/oauth/token")
@router.post("/auth/token", include_in_schema=False)
async def issue_token(request: Request) -> Response:
    """Repassa o grant client_credentials ao endpoint de token do upstream."""
    gateway = get_gateway(request)
    if gateway is None:
        return gateway_unavailable_response()

    try:
        token_request = await read_token_request(request)
        result = await gateway.issue_token(
            client_id=token_request.client_id,
            client_secret=token_request.client_secret,
            scope=token_request.scope,
        )
    except CallerInputError as exc:
        logger.warning(
            "token_request_rejected",
            extra={"route": request.url.path, "reason": type(exc).__name__},
        )
        return caller_error_response(exc)
    except UpstreamTransportError as exc:
        return transport_error_response(exc)

    return relay_response(result)
