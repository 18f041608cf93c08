"""Runtime configuration for the portfolio service.

Values come from the environment (a local ``.env`` is loaded by the entry
point). Nothing secret has a default: without ``TWELVE_DATA_API_KEY`` the
primary price provider refuses every lookup and the fallback provider, if
enabled, serves prices instead.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

FALLBACK_PROVIDERS = ('yfinance', 'none')


@dataclass(frozen=True)
class Settings:
    """Immutable service configuration."""

    twelve_data_api_key: Optional[str] = None
    twelve_data_base_url: str = 'https://api.twelvedata.com'
    price_request_timeout: float = 10.0
    fallback_provider: str = 'yfinance'
    history_file: str = 'portfolio_history.json'
    history_limit: int = 50
    app_version: str = '1.0.0'
    host: str = '0.0.0.0'
    port: int = 3000

    @classmethod
    def from_env(cls) -> 'Settings':
        """Build settings from environment variables, failing fast on bad values."""
        fallback = os.getenv('PRICE_FALLBACK_PROVIDER', cls.fallback_provider).strip().lower()
        if fallback not in FALLBACK_PROVIDERS:
            raise ValueError(
                f"Invalid PRICE_FALLBACK_PROVIDER '{fallback}'. "
                f"Valid values are: {', '.join(FALLBACK_PROVIDERS)}"
            )

        history_limit = int(os.getenv('HISTORY_LIMIT', cls.history_limit))
        if history_limit < 1:
            raise ValueError('HISTORY_LIMIT must be at least 1')

        timeout = float(os.getenv('PRICE_REQUEST_TIMEOUT', cls.price_request_timeout))
        if timeout <= 0:
            raise ValueError('PRICE_REQUEST_TIMEOUT must be positive')

        return cls(
            twelve_data_api_key=os.getenv('TWELVE_DATA_API_KEY') or None,
            twelve_data_base_url=os.getenv('TWELVE_DATA_BASE_URL', cls.twelve_data_base_url).rstrip('/'),
            price_request_timeout=timeout,
            fallback_provider=fallback,
            history_file=os.getenv('HISTORY_FILE', cls.history_file),
            history_limit=history_limit,
            app_version=os.getenv('APP_VERSION', cls.app_version),
            host=os.getenv('HOST', cls.host),
            port=int(os.getenv('PORT', cls.port)),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings for the running process, read once."""
    return Settings.from_env()
