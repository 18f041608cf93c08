import math
from typing import Optional

import requests

from portfolio_api.domain.errors import ProviderError
from portfolio_api.domain.repositories.price_provider import PriceProvider
from portfolio_api.utils.logger import logger


class TwelveDataPriceProvider(PriceProvider):
    """Fetches real-time prices from the TwelveData ``/price`` endpoint."""

    name = 'TwelveData'

    def __init__(self, api_key: Optional[str], base_url: str = 'https://api.twelvedata.com',
                 timeout: float = 10.0):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def fetch_price(self, symbol: str) -> float:
        try:
            return self._request_price(symbol)
        except ProviderError as e:
            logger.error(f'TwelveData API error for {symbol}: {e.message}', {'symbol': symbol})
            raise

    def _request_price(self, symbol: str) -> float:
        if not self.api_key:
            raise ProviderError(symbol, 'API key not configured')

        try:
            response = requests.get(
                f'{self.base_url}/price',
                params={'symbol': symbol, 'apikey': self.api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise ProviderError(symbol, f'timeout of {self.timeout:g}s exceeded') from e
        except requests.exceptions.HTTPError as e:
            raise ProviderError(symbol, f'Request failed with status code {response.status_code}') from e
        except requests.exceptions.RequestException as e:
            # requests messages embed the full URL, apikey included
            raise ProviderError(symbol, f'{type(e).__name__} while contacting TwelveData') from e

        try:
            payload = response.json()
        except ValueError as e:
            raise ProviderError(symbol, 'Invalid response format') from e

        # Errors come back as 200 with {"code": ..., "status": "error", "message": ...}
        price = payload.get('price') if isinstance(payload, dict) else None
        try:
            price = float(price)
        except (TypeError, ValueError):
            if isinstance(payload, dict) and payload.get('status') == 'error':
                raise ProviderError(symbol, payload.get('message') or 'Invalid response format')
            raise ProviderError(symbol, 'Invalid response format')

        if not math.isfinite(price):
            raise ProviderError(symbol, 'Invalid response format')
        return price
