"""Identidade TLS do cliente mTLS.

Carregada uma vez no boot; falha de carregamento impede o serviço de subir.
"""

from .errors import TlsIdentityError
from .identity import TlsIdentity, decode_b64, load_tls_identity, normalize_b64

__all__ = [
    "TlsIdentity",
    "TlsIdentityError",
    "decode_b64",
    "load_tls_identity",
    "normalize_b64",
]
