from portfolio_api.domain.errors import ValidationError
from portfolio_api.domain.models.stock import StockQuote
from portfolio_api.domain.usecases.price_resolver import PriceResolver
from portfolio_api.utils.formatting import format_money, utc_timestamp


class GetStockPriceUseCase:
    """Use case for looking up the current price of one symbol."""

    def __init__(self, price_resolver: PriceResolver):
        self.resolver = price_resolver

    def execute(self, symbol: str) -> StockQuote:
        """Fetch the current price for *symbol* (uppercased).

        Raises:
            ValidationError: if *symbol* is blank.
            PriceUnavailableError: if no provider could price the symbol.
        """
        if not symbol or not symbol.strip():
            raise ValidationError('Stock symbol is required')

        symbol = symbol.strip().upper()
        price = self.resolver.resolve_price(symbol)
        return StockQuote(symbol=symbol, price=format_money(price), timestamp=utc_timestamp())
