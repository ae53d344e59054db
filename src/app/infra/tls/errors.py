"""Erros de carregamento da identidade TLS."""

from utils.errors import ConfigurationError


class TlsIdentityError(ConfigurationError):
    """Certificado ou chave ausente, malformado ou inconsistente."""
