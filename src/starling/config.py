# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for the Starling client."""

import os
from dataclasses import dataclass, replace

from .version import __version__

PRODUCTION_URL = "https://api.starlingbank.com/"
SANDBOX_URL = "https://api-sandbox.starlingbank.com/"
DEFAULT_URL = PRODUCTION_URL

DEFAULT_USER_AGENT = f"starling-python/{__version__}"

_ENVIRONMENT_URLS = {
    "production": PRODUCTION_URL,
    "prod": PRODUCTION_URL,
    "sandbox": SANDBOX_URL,
}


def _float_env(name: str, default: float | None) -> float | None:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def base_url_for(environment: str | None) -> str:
    """Map an environment name (``production``/``sandbox``) to its API base URL."""
    key = (environment or "").strip().lower()
    return _ENVIRONMENT_URLS.get(key, DEFAULT_URL)


@dataclass(frozen=True)
class ClientSettings:
    """
    Immutable client configuration.

    ``base_url`` must end with a trailing slash. It is not checked here: every
    request build re-validates it and raises ConfigurationError otherwise.
    """

    base_url: str = DEFAULT_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float | None = 10.0
    verify_ssl: bool = True

    def replace(self, **changes) -> "ClientSettings":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Create settings from environment variables (evaluated at call time)."""
        base_url = os.getenv("STARLING_BASE_URL") or base_url_for(os.getenv("STARLING_ENVIRONMENT"))
        return cls(
            base_url=base_url,
            user_agent=os.getenv("STARLING_USER_AGENT", cls.user_agent),
            timeout=_float_env("STARLING_HTTP_TIMEOUT", cls.timeout),
            verify_ssl=_bool_env("STARLING_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


def load_client_settings() -> ClientSettings:
    """Load client settings from environment with sensible defaults."""
    return ClientSettings.from_env()


def load_access_token() -> str | None:
    """Return the personal access token from ``STARLING_ACCESS_TOKEN``, if set."""
    token = os.getenv("STARLING_ACCESS_TOKEN", "").strip()
    return token or None
