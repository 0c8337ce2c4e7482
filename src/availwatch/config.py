# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for availwatch."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"availwatch/{__version__} (+https://pypi.org/project/availwatch/)"

# Fixed check parameters. These define what "up" means and are not tunable.
REQUEST_TIMEOUT_SECONDS = 5.0
LATENCY_THRESHOLD_MS = 500.0
CHECK_INTERVAL_SECONDS = 15.0


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class MonitorSettings:
    """HTTP client defaults used by the health checker."""

    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    max_body_bytes: int = 16 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "MonitorSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("AVAILWATCH_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        return cls(
            user_agent=os.getenv("AVAILWATCH_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("AVAILWATCH_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("AVAILWATCH_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
        )


def load_monitor_settings() -> MonitorSettings:
    """Load monitor settings from environment with sensible defaults."""
    return MonitorSettings.from_env()
