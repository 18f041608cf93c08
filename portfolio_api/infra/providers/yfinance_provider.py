import math

import yfinance as yf

from portfolio_api.domain.errors import ProviderError
from portfolio_api.domain.repositories.price_provider import PriceProvider
from portfolio_api.utils.logger import logger


class YahooFinancePriceProvider(PriceProvider):
    """Fetches last traded prices from Yahoo Finance via the yfinance library."""

    name = 'Yahoo Finance'

    def fetch_price(self, symbol: str) -> float:
        try:
            price = self._last_price(symbol)
        except Exception as e:
            logger.error(f'Yahoo Finance error for {symbol}: {e}', {'symbol': symbol})
            raise ProviderError(symbol, str(e)) from e

        if price is None:
            message = f'No price data available for symbol: {symbol!r}'
            logger.error(f'Yahoo Finance error for {symbol}: {message}', {'symbol': symbol})
            raise ProviderError(symbol, message)
        return price

    def _last_price(self, symbol: str):
        ticker = yf.Ticker(symbol)
        price = getattr(ticker.fast_info, 'last_price', None)
        if not _is_number(price):
            price = ticker.info.get('currentPrice')
        return float(price) if _is_number(price) else None


def _is_number(value) -> bool:
    try:
        return value is not None and math.isfinite(float(value))
    except (TypeError, ValueError):
        return False
