"""Configuração do pytest para o projeto Inter Bridge."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ e a raiz do projeto (tests.fakes) ao PYTHONPATH para permitir imports absolutos
root_path = Path(__file__).parent.parent
for extra_path in (root_path / "src", root_path):
    if str(extra_path) not in sys.path:
        sys.path.insert(0, str(extra_path))

from config.settings import get_base_settings, get_inter_settings  # noqa: E402

INTER_ENV_VARS = (
    "INTER_BASE_URL",
    "INTER_CERT_B64",
    "INTER_KEY_B64",
    "INTER_CLIENT_ID",
    "INTER_CLIENT_SECRET",
    "INTER_DEFAULT_SCOPE",
    "INTER_TOKEN_PATH",
    "INTER_CHARGES_PATH",
    "INTER_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Remove envs do Inter e limpa caches de settings entre testes."""
    for name in INTER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_inter_settings.cache_clear()
    get_base_settings.cache_clear()
    yield
    get_inter_settings.cache_clear()
    get_base_settings.cache_clear()
