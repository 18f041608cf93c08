from fastapi import APIRouter, Depends, HTTPException

from portfolio_api.domain.errors import PriceUnavailableError, ValidationError
from portfolio_api.domain.models.stock import StockQuote
from portfolio_api.domain.usecases.price_resolver import PriceResolver
from portfolio_api.domain.usecases.stocks.get_stock_price import GetStockPriceUseCase
from portfolio_api.presentation.routes.router import DefaultRouter
from portfolio_api.presentation.factories.repository_factory import build_price_resolver
from portfolio_api.utils.logger import logger

router = APIRouter(route_class=DefaultRouter)


# path convertor so that an empty segment reaches the handler and pairs like EUR/USD resolve
@router.get('/stock/{symbol:path}',
            summary='Return the current price of one symbol',
            response_model=StockQuote)
def get_stock_price(symbol: str, resolver: PriceResolver = Depends(build_price_resolver)):
    try:
        use_case = GetStockPriceUseCase(resolver)
        return use_case.execute(symbol)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except PriceUnavailableError as e:
        logger.error(f'Stock price error for {symbol}: {e}', {'symbol': symbol})
        raise HTTPException(status_code=404, detail=f'Unable to fetch price for {symbol}: {e}') from e
