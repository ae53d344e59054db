"""Identidade TLS do cliente (mTLS) a partir de blobs base64.

Fluxo:
1. Normaliza o valor da env (aspas, espaços, quebras de linha)
2. Decodifica base64
3. Faz parse de certificado x509 e chave privada (PEM ou DER)
4. Confere que a chave corresponde ao certificado
5. Expõe um ssl.SSLContext pronto para o cliente HTTP
"""

from __future__ import annotations

import base64
import binascii
import logging
import os
import ssl
import tempfile
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from cryptography import x509
from cryptography.hazmat.primitives import serialization

from .errors import TlsIdentityError

logger = logging.getLogger(__name__)

_QUOTE_CHARS = "\"'"


def normalize_b64(value: str) -> str:
    """Remove aspas ao redor e qualquer whitespace de um valor base64."""
    stripped = value.strip()
    while len(stripped) >= 2 and stripped[0] == stripped[-1] and stripped[0] in _QUOTE_CHARS:
        stripped = stripped[1:-1].strip()
    return "".join(stripped.split())


def decode_b64(value: str, label: str) -> bytes:
    """Decodifica base64 padrão, aceitando padding ausente.

    Raises:
        TlsIdentityError: Se valor vazio ou não for base64 válido.
    """
    normalized = normalize_b64(value)
    if not normalized:
        raise TlsIdentityError(f"{label} não configurado")
    padded = normalized + ("=" * (-len(normalized) % 4))
    try:
        decoded = base64.b64decode(padded, validate=True)
    except (ValueError, binascii.Error) as exc:
        raise TlsIdentityError(f"{label} não é base64 válido") from exc
    if not decoded:
        raise TlsIdentityError(f"{label} vazio após decodificação")
    return decoded


def _load_certificate(data: bytes) -> x509.Certificate:
    try:
        if b"-----BEGIN" in data:
            return x509.load_pem_x509_certificate(data)
        return x509.load_der_x509_certificate(data)
    except ValueError as exc:
        raise TlsIdentityError("INTER_CERT_B64 não contém um certificado x509 válido") from exc


def _load_private_key(data: bytes) -> Any:
    try:
        if b"-----BEGIN" in data:
            return serialization.load_pem_private_key(data, password=None)
        return serialization.load_der_private_key(data, password=None)
    except (ValueError, TypeError) as exc:
        # TypeError: chave protegida por senha
        raise TlsIdentityError("INTER_KEY_B64 não contém uma chave privada válida") from exc


def _public_key_bytes(public_key: Any) -> bytes:
    return public_key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


@dataclass(frozen=True)
class TlsIdentity:
    """Par certificado/chave usado em toda conexão com o upstream.

    Imutável após o carregamento. Os bytes PEM nunca aparecem no repr.
    """

    cert_pem: bytes = field(repr=False)
    key_pem: bytes = field(repr=False)
    subject: str
    not_valid_after: datetime

    @property
    def is_expired(self) -> bool:
        return datetime.now(UTC) >= self.not_valid_after

    def create_ssl_context(self) -> ssl.SSLContext:
        """Cria SSLContext cliente com verificação do servidor e cert do cliente.

        ssl.load_cert_chain só aceita paths, então o material é gravado em
        diretório temporário privado e removido logo após o carregamento.
        """
        ctx = ssl.create_default_context(ssl.Purpose.SERVER_AUTH)
        ctx.minimum_version = ssl.TLSVersion.TLSv1_2

        with tempfile.TemporaryDirectory(prefix="inter-bridge-") as tmp_dir:
            cert_path = os.path.join(tmp_dir, "client.crt")
            key_path = os.path.join(tmp_dir, "client.key")
            _write_private_file(cert_path, self.cert_pem)
            _write_private_file(key_path, self.key_pem)
            try:
                ctx.load_cert_chain(certfile=cert_path, keyfile=key_path)
            except ssl.SSLError as exc:
                raise TlsIdentityError(f"Falha ao carregar identidade TLS: {exc}") from exc

        return ctx


def _write_private_file(path: str, data: bytes) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)


def load_tls_identity(cert_b64: str, key_b64: str) -> TlsIdentity:
    """Carrega e valida a identidade TLS a partir das envs base64.

    Args:
        cert_b64: Certificado (PEM ou DER) em base64
        key_b64: Chave privada não criptografada (PEM ou DER) em base64

    Returns:
        TlsIdentity validada

    Raises:
        TlsIdentityError: Se qualquer metade estiver ausente, malformada
            ou se a chave não corresponder ao certificado
    """
    cert_raw = decode_b64(cert_b64 or "", "INTER_CERT_B64")
    key_raw = decode_b64(key_b64 or "", "INTER_KEY_B64")

    certificate = _load_certificate(cert_raw)
    private_key = _load_private_key(key_raw)

    if _public_key_bytes(certificate.public_key()) != _public_key_bytes(private_key.public_key()):
        raise TlsIdentityError("INTER_KEY_B64 não corresponde ao certificado INTER_CERT_B64")

    identity = TlsIdentity(
        cert_pem=certificate.public_bytes(serialization.Encoding.PEM),
        key_pem=private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        ),
        subject=certificate.subject.rfc4514_string(),
        not_valid_after=certificate.not_valid_after_utc,
    )

    if identity.is_expired:
        logger.warning(
            "tls_identity_expired",
            extra={
                "subject": identity.subject,
                "not_valid_after": identity.not_valid_after.isoformat(),
            },
        )
    else:
        logger.info(
            "tls_identity_loaded",
            extra={
                "subject": identity.subject,
                "not_valid_after": identity.not_valid_after.isoformat(),
            },
        )
    return identity
