"""Serviços de aplicação.

Orquestração das operações do bridge; IO concreto fica em app/infra/.
"""

from app.services.inter_gateway import (
    PDF_MEDIA_TYPE,
    InterGateway,
    RelayResult,
    encode_path_segment,
    require_bearer,
)

__all__ = [
    "PDF_MEDIA_TYPE",
    "InterGateway",
    "RelayResult",
    "encode_path_segment",
    "require_bearer",
]
