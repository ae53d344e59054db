"""Protocolos HTTP usados pelo app.

Evita dependência direta do gateway em httpx.
"""

from __future__ import annotations

from typing import Any, Protocol


class UpstreamResponseProtocol(Protocol):
    """Subconjunto de httpx.Response usado no relay."""

    status_code: int

    @property
    def headers(self) -> Any: ...

    @property
    def content(self) -> bytes: ...


class UpstreamHttpClientProtocol(Protocol):
    """Contrato mínimo para o cliente HTTP do upstream."""

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        json: Any = None,
        data: dict[str, str] | None = None,
    ) -> UpstreamResponseProtocol: ...

    async def aclose(self) -> None: ...
