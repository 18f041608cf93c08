"""
Resolves the price of a symbol from a primary provider, trying a single
fallback provider when the primary one fails.
"""

import math
from typing import Optional

from portfolio_api.domain.errors import PriceUnavailableError, ProviderError
from portfolio_api.domain.repositories.price_provider import PriceProvider
from portfolio_api.utils.logger import logger


class PriceResolver:
    """Applies the primary-then-fallback lookup policy. No retries, no backoff."""

    def __init__(self, primary: PriceProvider, fallback: Optional[PriceProvider] = None):
        self.primary = primary
        self.fallback = fallback

    def resolve_price(self, symbol: str) -> float:
        try:
            return self._fetch(self.primary, symbol)
        except ProviderError as e:
            primary_error = e

        if self.fallback is None:
            logger.warning(f'{self.primary.name} failed for {symbol}, no fallback provider configured')
            raise PriceUnavailableError(symbol) from primary_error

        logger.warning(f'{self.primary.name} failed for {symbol}, trying {self.fallback.name}...')
        try:
            return self._fetch(self.fallback, symbol)
        except ProviderError as e:
            raise PriceUnavailableError(symbol) from e

    @staticmethod
    def _fetch(provider: PriceProvider, symbol: str) -> float:
        price = provider.fetch_price(symbol)
        # Prices must be finite to be rounded to cents
        if not math.isfinite(price):
            logger.error(f'{provider.name} returned a non-finite price for {symbol}: {price}', {'symbol': symbol})
            raise ProviderError(symbol, 'Invalid response format')
        return price
