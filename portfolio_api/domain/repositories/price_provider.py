from abc import ABC, abstractmethod


class PriceProvider(ABC):
    """Interface for a remote source of current stock prices."""

    name: str = 'provider'

    @abstractmethod
    def fetch_price(self, symbol: str) -> float:
        """Return the current price of an uppercased symbol.

        Raises:
            ProviderError: on network failure, timeout, non-2xx status or a
                response without a numeric price.
        """
        pass
