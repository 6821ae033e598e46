# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for httpi."""

import os
from dataclasses import dataclass


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _optional_float_env(name: str, default: float | None) -> float | None:
    try:
        value = os.getenv(name)
        if value is None:
            return default
        parsed = float(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


def _log_level_env(name: str, default: str) -> str:
    value = (os.getenv(name) or "").strip().upper()
    return value or default


@dataclass
class HttpSettings:
    """Request logging and engine defaults."""

    log_requests: bool = True
    log_level: str = "DEBUG"
    verify_ssl: bool = True
    default_timeout: float | None = None

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            log_requests=_bool_env("HTTPI_LOG", cls.log_requests),
            log_level=_log_level_env("HTTPI_REQUEST_LOG_LEVEL", cls.log_level),
            verify_ssl=_bool_env("HTTPI_VERIFY_SSL", cls.verify_ssl),
            default_timeout=_optional_float_env("HTTPI_DEFAULT_TIMEOUT", cls.default_timeout),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
