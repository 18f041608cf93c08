from fastapi import Depends

from portfolio_api.config.settings import Settings, get_settings
from portfolio_api.domain.repositories.history_repository import HistoryRepository
from portfolio_api.domain.usecases.price_resolver import PriceResolver
from portfolio_api.infra.providers.twelve_data_provider import TwelveDataPriceProvider
from portfolio_api.infra.providers.yfinance_provider import YahooFinancePriceProvider
from portfolio_api.infra.repositories.history_repository_impl import JsonFileHistoryRepository


def build_history_repository(settings: Settings = Depends(get_settings)) -> HistoryRepository:
    """Factory function to create a HistoryRepository instance."""
    return JsonFileHistoryRepository(settings.history_file, limit=settings.history_limit)


def build_price_resolver(settings: Settings = Depends(get_settings)) -> PriceResolver:
    """Factory function wiring the primary and optional fallback price providers."""
    primary = TwelveDataPriceProvider(
        api_key=settings.twelve_data_api_key,
        base_url=settings.twelve_data_base_url,
        timeout=settings.price_request_timeout,
    )
    fallback = YahooFinancePriceProvider() if settings.fallback_provider == 'yfinance' else None
    return PriceResolver(primary, fallback)
