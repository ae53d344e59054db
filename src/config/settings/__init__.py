"""Agregador de settings do Inter Bridge.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_PORT,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.inter import (
    INTER_BASE_URL,
    INTER_CHARGES_PATH,
    INTER_DEFAULT_SCOPE,
    INTER_TIMEOUT_SECONDS,
    INTER_TOKEN_PATH,
    InterSettings,
    get_inter_settings,
)

__all__ = [
    "DEFAULT_PORT",
    "INTER_BASE_URL",
    "INTER_CHARGES_PATH",
    "INTER_DEFAULT_SCOPE",
    "INTER_TIMEOUT_SECONDS",
    "INTER_TOKEN_PATH",
    "BaseSettings",
    "Environment",
    "InterSettings",
    "get_base_settings",
    "get_inter_settings",
]
