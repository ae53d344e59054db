"""Testes end-to-end das rotas do Inter (app ASGI + upstream stub via respx)."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import pytest
from respx import MockRouter

from app.app import create_app
from app.infra.http import HttpClientConfig, MtlsHttpClient
from app.services import InterGateway
from config.settings import InterSettings

UPSTREAM = "https://inter.test"
TOKEN_URL = f"{UPSTREAM}/oauth/v2/token"
CHARGES_URL = f"{UPSTREAM}/api/v2/cobrancas"
BEARER = {"Authorization": "Bearer tok-abc"}


def _settings(**overrides: object) -> InterSettings:
    values: dict[str, object] = {
        "base_url": UPSTREAM,
        "cert_b64": "unused",
        "key_b64": "unused",
        "client_id": "config-id",
        "client_secret": "config-secret",
    }
    values.update(overrides)
    return InterSettings(**values)  # type: ignore[arg-type]


@asynccontextmanager
async def _bridge(base_url: str = UPSTREAM, **overrides: object) -> AsyncIterator[httpx.AsyncClient]:
    settings = _settings(base_url=base_url, **overrides)
    upstream = MtlsHttpClient(
        HttpClientConfig(base_url=settings.base_url, timeout_seconds=5.0),
        verify=False,
    )
    app = create_app(inter_settings=settings, gateway=InterGateway(settings, upstream))
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://bridge") as client:
        yield client
    await upstream.aclose()


class TestTokenRoute:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [200, 400, 401])
    async def test_status_mirrors_upstream(self, respx_mock: MockRouter, status_code: int) -> None:
        upstream_body = {"access_token": "abc", "token_type": "Bearer", "expires_in": 3600}
        respx_mock.post(TOKEN_URL).mock(return_value=httpx.Response(status_code, json=upstream_body))

        async with _bridge() as client:
            response = await client.post("/oauth/token", json={"scope": "boleto-cobranca.read"})

        assert response.status_code == status_code
        assert response.json() == upstream_body

    @pytest.mark.asyncio
    async def test_alias_route_uses_same_handler(self, respx_mock: MockRouter) -> None:
        route = respx_mock.post(TOKEN_URL).mock(return_value=httpx.Response(200, json={"access_token": "x"}))

        async with _bridge() as client:
            response = await client.post("/auth/token", json={})

        assert response.status_code == 200
        assert route.call_count == 1

    @pytest.mark.asyncio
    async def test_sends_form_encoded_grant(self, respx_mock: MockRouter) -> None:
        route = respx_mock.post(TOKEN_URL).mock(return_value=httpx.Response(200, json={}))

        async with _bridge() as client:
            await client.post(
                "/oauth/token",
                json={"client_id": "caller-id", "client_secret": "caller-secret"},
            )

        request = route.calls.last.request
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        form = dict(httpx.QueryParams(request.content.decode()))
        assert form == {
            "grant_type": "client_credentials",
            "client_id": "caller-id",
            "client_secret": "caller-secret",
            "scope": "boleto-cobranca.read boleto-cobranca.write",
        }

    @pytest.mark.asyncio
    async def test_accepts_form_encoded_body(self, respx_mock: MockRouter) -> None:
        route = respx_mock.post(TOKEN_URL).mock(return_value=httpx.Response(200, json={}))

        async with _bridge() as client:
            await client.post("/oauth/token", data={"scope": "extrato.read"})

        form = dict(httpx.QueryParams(route.calls.last.request.content.decode()))
        assert form["scope"] == "extrato.read"
        assert form["client_id"] == "config-id"

    @pytest.mark.asyncio
    async def test_empty_body_uses_configuration(self, respx_mock: MockRouter) -> None:
        route = respx_mock.post(TOKEN_URL).mock(return_value=httpx.Response(200, json={}))

        async with _bridge() as client:
            response = await client.post("/oauth/token")

        assert response.status_code == 200
        form = dict(httpx.QueryParams(route.calls.last.request.content.decode()))
        assert form["client_secret"] == "config-secret"

    @pytest.mark.asyncio
    async def test_malformed_body_rejected(self, respx_mock: MockRouter) -> None:
        async with _bridge() as client:
            response = await client.post(
                "/oauth/token",
                content=b"{not json",
                headers={"content-type": "application/json"},
            )

        assert response.status_code == 400
        assert len(respx_mock.calls) == 0

    @pytest.mark.asyncio
    async def test_non_json_constant_rejected(self, respx_mock: MockRouter) -> None:
        async with _bridge() as client:
            response = await client.post(
                "/oauth/token",
                content=b'{"scope": Infinity}',
                headers={"content-type": "application/json"},
            )

        assert response.status_code == 400
        assert len(respx_mock.calls) == 0

    @pytest.mark.asyncio
    async def test_missing_credentials_rejected(self, respx_mock: MockRouter) -> None:
        async with _bridge(client_id="", client_secret="") as client:
            response = await client.post("/oauth/token", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "credenciais OAuth ausentes"
        assert len(respx_mock.calls) == 0


class TestCreateChargeRoute:
    @pytest.mark.asyncio
    async def test_json_body_forwarded_unchanged(self, respx_mock: MockRouter) -> None:
        payload = {
            "seuNumero": "PED-001",
            "valorNominal": 150.75,
            "dataVencimento": "2026-11-30",
            "numDiasAgenda": 60,
            "pagador": {"cpfCnpj": "12345678909", "tipoPessoa": "FISICA", "nome": "Joana Ção"},
        }
        route = respx_mock.post(CHARGES_URL).mock(
            return_value=httpx.Response(200, json={"nossoNumero": "00999"})
        )

        async with _bridge() as client:
            response = await client.post("/cobrancas", json=payload, headers=BEARER)

        request = route.calls.last.request
        assert json.loads(request.content) == payload
        assert request.headers["authorization"] == "Bearer tok-abc"
        assert response.status_code == 200
        assert response.json() == {"nossoNumero": "00999"}

    @pytest.mark.asyncio
    async def test_upstream_error_relayed_verbatim(self, respx_mock: MockRouter) -> None:
        body = {"title": "Requisição inválida", "violacoes": [{"propriedade": "valorNominal"}]}
        respx_mock.post(CHARGES_URL).mock(return_value=httpx.Response(400, json=body))

        async with _bridge() as client:
            response = await client.post("/cobrancas", json={"valorNominal": -1}, headers=BEARER)

        assert response.status_code == 400
        assert response.json() == body

    @pytest.mark.asyncio
    async def test_account_header_forwarded(self, respx_mock: MockRouter) -> None:
        route = respx_mock.post(CHARGES_URL).mock(return_value=httpx.Response(200, json={}))

        async with _bridge() as client:
            await client.post(
                "/cobrancas",
                json={"a": 1},
                headers={**BEARER, "x-conta-corrente": "998877"},
            )

        assert route.calls.last.request.headers["x-conta-corrente"] == "998877"

    @pytest.mark.asyncio
    async def test_missing_bearer_returns_401_without_upstream_call(self, respx_mock: MockRouter) -> None:
        async with _bridge() as client:
            response = await client.post("/cobrancas", json={"a": 1})

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert len(respx_mock.calls) == 0

    @pytest.mark.asyncio
    async def test_missing_bearer_wins_over_invalid_body(self, respx_mock: MockRouter) -> None:
        async with _bridge() as client:
            response = await client.post("/cobrancas", content=b"not json")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_json_returns_400(self, respx_mock: MockRouter) -> None:
        async with _bridge() as client:
            response = await client.post(
                "/cobrancas",
                content=b"{broken",
                headers={**BEARER, "content-type": "application/json"},
            )

        assert response.status_code == 400
        assert len(respx_mock.calls) == 0

    @pytest.mark.asyncio
    async def test_non_json_constant_returns_400(self, respx_mock: MockRouter) -> None:
        async with _bridge() as client:
            response = await client.post(
                "/cobrancas",
                content=b'{"valorNominal": NaN}',
                headers={**BEARER, "content-type": "application/json"},
            )

        assert response.status_code == 400
        assert response.json()["error"] == "payload inválido"
        assert len(respx_mock.calls) == 0

    @pytest.mark.asyncio
    async def test_non_ascii_account_header_returns_400(self, respx_mock: MockRouter) -> None:
        async with _bridge() as client:
            response = await client.post(
                "/cobrancas",
                json={"a": 1},
                headers={
                    b"authorization": b"Bearer tok-abc",
                    b"x-conta-corrente": "conta-ç".encode("latin-1"),
                },
            )

        assert response.status_code == 400
        assert response.json()["error"] == "header inválido"
        assert len(respx_mock.calls) == 0

    @pytest.mark.asyncio
    async def test_connection_refused_returns_502(self, respx_mock: MockRouter) -> None:
        respx_mock.post(CHARGES_URL).mock(side_effect=httpx.ConnectError("Connection refused"))

        async with _bridge() as client:
            response = await client.post("/cobrancas", json={"a": 1}, headers=BEARER)

        assert response.status_code == 502
        payload = response.json()
        assert payload["error"] == "erro interno no bridge"
        assert payload["detail"]


class TestChargePdfRoute:
    @pytest.mark.asyncio
    async def test_pdf_bytes_and_content_type(self, respx_mock: MockRouter) -> None:
        pdf_bytes = b"%PDF-1.7\n%\xe2\xe3\xcf\xd3\n1 0 obj\n"
        respx_mock.get(f"{CHARGES_URL}/00123/pdf").mock(
            return_value=httpx.Response(
                200, content=pdf_bytes, headers={"content-type": "application/pdf"}
            )
        )

        async with _bridge() as client:
            response = await client.get("/cobrancas/00123/pdf", headers=BEARER)

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content == pdf_bytes

    @pytest.mark.asyncio
    async def test_encoded_identifier_reencoded_upstream(self, respx_mock: MockRouter) -> None:
        route = respx_mock.get(url__regex=rf"{CHARGES_URL}/.+/pdf").mock(
            return_value=httpx.Response(200, content=b"%PDF", headers={"content-type": "application/pdf"})
        )

        async with _bridge() as client:
            response = await client.get("/cobrancas/abc%2F123/pdf", headers=BEARER)

        assert response.status_code == 200
        assert route.calls.last.request.url.raw_path == b"/api/v2/cobrancas/abc%2F123/pdf"

    @pytest.mark.asyncio
    async def test_non_pdf_error_relayed(self, respx_mock: MockRouter) -> None:
        body = {"title": "Cobrança não encontrada"}
        respx_mock.get(f"{CHARGES_URL}/404/pdf").mock(return_value=httpx.Response(404, json=body))

        async with _bridge() as client:
            response = await client.get("/cobrancas/404/pdf", headers=BEARER)

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/json"
        assert response.json() == body

    @pytest.mark.asyncio
    async def test_missing_bearer_returns_401(self, respx_mock: MockRouter) -> None:
        async with _bridge() as client:
            response = await client.get("/cobrancas/1/pdf")

        assert response.status_code == 401
        assert len(respx_mock.calls) == 0

    @pytest.mark.asyncio
    async def test_non_ascii_bearer_returns_400(self, respx_mock: MockRouter) -> None:
        async with _bridge() as client:
            response = await client.get(
                "/cobrancas/1/pdf",
                headers={b"authorization": "Bearer tøk".encode("latin-1")},
            )

        assert response.status_code == 400
        assert response.json()["error"] == "header inválido"
        assert len(respx_mock.calls) == 0

    @pytest.mark.asyncio
    async def test_text_content_type_relayed_verbatim(self, respx_mock: MockRouter) -> None:
        respx_mock.get(f"{CHARGES_URL}/1/pdf").mock(
            return_value=httpx.Response(
                503, content=b"manutencao", headers={"content-type": "text/plain"}
            )
        )

        async with _bridge() as client:
            response = await client.get("/cobrancas/1/pdf", headers=BEARER)

        assert response.status_code == 503
        assert response.headers["content-type"] == "text/plain"
        assert response.content == b"manutencao"

    @pytest.mark.asyncio
    async def test_timeout_returns_502(self, respx_mock: MockRouter) -> None:
        respx_mock.get(f"{CHARGES_URL}/1/pdf").mock(side_effect=httpx.ReadTimeout("timed out"))

        async with _bridge() as client:
            response = await client.get("/cobrancas/1/pdf", headers=BEARER)

        assert response.status_code == 502
        assert "tempo limite" in response.json()["detail"]


class TestUnreachableUpstream:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "path", "kwargs"),
        [
            ("POST", "/oauth/token", {"json": {}}),
            ("POST", "/cobrancas", {"json": {"a": 1}, "headers": BEARER}),
            ("GET", "/cobrancas/1/pdf", {"headers": BEARER}),
        ],
    )
    async def test_every_forwarding_route_returns_502(
        self, method: str, path: str, kwargs: dict[str, object]
    ) -> None:
        async with _bridge(base_url="http://127.0.0.1:1") as client:
            response = await client.request(method, path, **kwargs)  # type: ignore[arg-type]

        assert response.status_code == 502
        assert response.json()["detail"]


@pytest.mark.asyncio
async def test_correlation_id_echoed(respx_mock: MockRouter) -> None:
    respx_mock.post(TOKEN_URL).mock(return_value=httpx.Response(200, json={}))

    async with _bridge() as client:
        response = await client.post("/oauth/token", json={}, headers={"X-Correlation-ID": "req-42"})

    assert response.headers["x-correlation-id"] == "req-42"


@pytest.mark.asyncio
async def test_gateway_not_initialized_returns_503() -> None:
    app = create_app(inter_settings=_settings())
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://bridge") as client:
        response = await client.post("/cobrancas", json={}, headers=BEARER)

    assert response.status_code == 503
