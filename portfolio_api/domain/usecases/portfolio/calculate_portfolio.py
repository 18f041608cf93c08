import math
from decimal import Decimal
from typing import List, Optional

from portfolio_api.domain.errors import PriceUnavailableError, ValidationError
from portfolio_api.domain.models.portfolio import (
    HistoryEntry,
    PortfolioResponse,
    StockRequestItem,
    StockResult,
)
from portfolio_api.domain.repositories.history_repository import HistoryRepository
from portfolio_api.domain.usecases.price_resolver import PriceResolver
from portfolio_api.utils.formatting import epoch_millis, format_money, to_money, utc_timestamp
from portfolio_api.utils.logger import logger

INVALID_ITEM_ERROR = 'Invalid symbol or quantity'
INVALID_INPUT_ERROR = 'Invalid input. Please provide an array of stocks.'


class CalculatePortfolioUseCase:
    """Use case for valuing a list of holdings and recording the result."""

    def __init__(self, price_resolver: PriceResolver, history_repository: HistoryRepository):
        self.resolver = price_resolver
        self.history = history_repository

    def execute(self, items: Optional[List[StockRequestItem]]) -> PortfolioResponse:
        """Price every item in order, sum the priced ones and append the result to history.

        Items are isolated: an invalid item or a failed lookup yields an error
        result for that item only. The calculation is recorded even when no
        item could be priced.

        Raises:
            ValidationError: if *items* is missing or empty.
        """
        if not items:
            raise ValidationError(INVALID_INPUT_ERROR)

        results = []
        total = Decimal('0')

        for item in items:
            result, value = self._price_item(item)
            results.append(result)
            total += value

        response = PortfolioResponse(
            stocks=results,
            total_portfolio_value=format_money(total),
            timestamp=utc_timestamp(),
        )

        self.history.append(HistoryEntry(**response.model_dump(), id=epoch_millis()))
        logger.info(f'Portfolio calculated: {len(results)} items, total {response.total_portfolio_value}')

        return response

    def _price_item(self, item: StockRequestItem):
        if not item.symbol or not item.quantity or item.quantity <= 0 or not math.isfinite(item.quantity):
            return StockResult(symbol=item.symbol or 'Unknown', error=INVALID_ITEM_ERROR), Decimal('0')

        symbol = item.symbol.upper()
        try:
            price = self.resolver.resolve_price(symbol)
        except PriceUnavailableError as e:
            logger.error(f'Price lookup failed for {symbol}: {e}', {'symbol': symbol})
            return StockResult(symbol=symbol, error=f'Unable to fetch price: {e}'), Decimal('0')

        total_value = to_money(Decimal(str(price)) * Decimal(str(item.quantity)))
        result = StockResult(
            symbol=symbol,
            quantity=item.quantity,
            current_price=format_money(price),
            total_value=format_money(total_value),
        )
        return result, total_value
