class PortfolioServiceError(Exception):
    """Base class for errors raised by the portfolio domain."""


class ValidationError(PortfolioServiceError):
    """Malformed or empty request payload."""


class ProviderError(PortfolioServiceError):
    """A remote price source failed for one symbol."""

    def __init__(self, symbol: str, message: str):
        super().__init__(message)
        self.symbol = symbol
        self.message = message


class PriceUnavailableError(PortfolioServiceError):
    """Every configured price source failed for a symbol."""

    def __init__(self, symbol: str):
        super().__init__(f'Unable to fetch price for {symbol}')
        self.symbol = symbol


class StorageError(PortfolioServiceError):
    """The history file could not be read or written."""
