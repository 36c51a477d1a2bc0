"""Agregador de settings do lead relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.telegram import (
    DEFAULT_LEAD_TIMEZONE,
    TELEGRAM_API_BASE_URL,
    TelegramSettings,
    load_telegram_settings,
)

__all__ = [
    # Constants
    "DEFAULT_LEAD_TIMEZONE",
    "DEFAULT_SERVICE_NAME",
    "TELEGRAM_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "TelegramSettings",
    "get_base_settings",
    "load_telegram_settings",
]
