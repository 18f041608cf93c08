import pytest

from conftest import FakePriceProvider
from portfolio_api.domain.errors import PriceUnavailableError
from portfolio_api.domain.usecases.price_resolver import PriceResolver
from portfolio_api.utils.logger import logger


@pytest.fixture(autouse=True)
def clean_logs():
    logger.clear_logs()


def test_primary_success_skips_fallback():
    primary = FakePriceProvider({'AAPL': 150.0}, name='Primary')
    fallback = FakePriceProvider({'AAPL': 999.0}, name='Backup')

    assert PriceResolver(primary, fallback).resolve_price('AAPL') == 150.0
    assert fallback.calls == []


def test_fallback_used_when_primary_fails():
    primary = FakePriceProvider({}, name='Primary')
    fallback = FakePriceProvider({'AAPL': 151.5}, name='Backup')

    assert PriceResolver(primary, fallback).resolve_price('AAPL') == 151.5
    assert primary.calls == ['AAPL']
    assert fallback.calls == ['AAPL']
    warnings = [log['message'] for log in logger.get_logs(level='WARNING')]
    assert 'Primary failed for AAPL, trying Backup...' in warnings


def test_both_failing_raises_price_unavailable():
    primary = FakePriceProvider({}, name='Primary')
    fallback = FakePriceProvider({}, name='Backup')

    with pytest.raises(PriceUnavailableError, match='Unable to fetch price for AAPL') as exc_info:
        PriceResolver(primary, fallback).resolve_price('AAPL')

    assert exc_info.value.symbol == 'AAPL'
    assert fallback.calls == ['AAPL']


def test_without_fallback_fails_after_single_attempt():
    primary = FakePriceProvider({}, name='Primary')

    with pytest.raises(PriceUnavailableError):
        PriceResolver(primary).resolve_price('AAPL')

    assert primary.calls == ['AAPL']
    warnings = [log['message'] for log in logger.get_logs(level='WARNING')]
    assert warnings == ['Primary failed for AAPL, no fallback provider configured']


def test_non_finite_primary_price_falls_back():
    primary = FakePriceProvider({'AAPL': float('inf')}, name='Primary')
    fallback = FakePriceProvider({'AAPL': 150.0}, name='Backup')

    assert PriceResolver(primary, fallback).resolve_price('AAPL') == 150.0


def test_non_finite_price_is_unavailable():
    primary = FakePriceProvider({'AAPL': float('nan')}, name='Primary')

    with pytest.raises(PriceUnavailableError):
        PriceResolver(primary).resolve_price('AAPL')
