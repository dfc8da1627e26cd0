"""Public API for Arctic Fox configuration."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_FALLBACK_BODY,
    DEFAULT_SUCCESS_MESSAGE,
    DEFAULT_SYMBOLS,
    ArcticFoxSettings,
    HasherSettings,
    LoggingSettings,
    PasswordPolicySettings,
    ResponseSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_FALLBACK_BODY",
    "DEFAULT_SUCCESS_MESSAGE",
    "DEFAULT_SYMBOLS",
    "ArcticFoxSettings",
    "HasherSettings",
    "LoggingSettings",
    "PasswordPolicySettings",
    "ResponseSettings",
    "load_settings",
]
