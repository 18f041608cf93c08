import pytest
from fastapi.testclient import TestClient

from portfolio_api.config.settings import Settings, get_settings
from portfolio_api.domain.errors import ProviderError
from portfolio_api.domain.repositories.price_provider import PriceProvider
from portfolio_api.domain.usecases.price_resolver import PriceResolver
from portfolio_api.infra.repositories.history_repository_impl import JsonFileHistoryRepository
from portfolio_api.main import app
from portfolio_api.presentation.factories.repository_factory import (
    build_history_repository,
    build_price_resolver,
)


class FakePriceProvider(PriceProvider):
    """Serves prices from a dict; unknown symbols fail like a remote error."""

    def __init__(self, prices=None, name='Fake'):
        self.prices = prices or {}
        self.name = name
        self.calls = []

    def fetch_price(self, symbol: str) -> float:
        self.calls.append(symbol)
        if symbol not in self.prices:
            raise ProviderError(symbol, f'no quote for {symbol}')
        return self.prices[symbol]


@pytest.fixture
def provider():
    return FakePriceProvider({'AAPL': 150.0, 'MSFT': 410.255, 'GOOGL': 171.1})


@pytest.fixture
def history_file(tmp_path):
    return tmp_path / 'portfolio_history.json'


@pytest.fixture
def history_repository(history_file):
    return JsonFileHistoryRepository(str(history_file), limit=50)


@pytest.fixture
def client(provider, history_repository):
    app.dependency_overrides[build_price_resolver] = lambda: PriceResolver(provider)
    app.dependency_overrides[build_history_repository] = lambda: history_repository
    app.dependency_overrides[get_settings] = lambda: Settings(app_version='1.0.0')
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
