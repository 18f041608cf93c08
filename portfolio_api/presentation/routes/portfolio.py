from typing import List

from fastapi import APIRouter, Depends, HTTPException

from portfolio_api.domain.errors import StorageError, ValidationError
from portfolio_api.domain.models.portfolio import HistoryEntry, PortfolioRequest, PortfolioResponse
from portfolio_api.domain.repositories.history_repository import HistoryRepository
from portfolio_api.domain.usecases.portfolio.calculate_portfolio import CalculatePortfolioUseCase
from portfolio_api.domain.usecases.portfolio.get_portfolio_history import GetPortfolioHistoryUseCase
from portfolio_api.domain.usecases.price_resolver import PriceResolver
from portfolio_api.presentation.routes.router import DefaultRouter
from portfolio_api.presentation.factories.repository_factory import (
    build_history_repository,
    build_price_resolver,
)
from portfolio_api.utils.logger import logger

router = APIRouter(route_class=DefaultRouter)


@router.post('/portfolio',
             summary='Calculate the current value of a portfolio',
             response_model=PortfolioResponse,
             response_model_exclude_none=True)
def calculate_portfolio(
    request: PortfolioRequest,
    resolver: PriceResolver = Depends(build_price_resolver),
    repository: HistoryRepository = Depends(build_history_repository)
):
    """
    Prices each holding with the latest quote and returns per-item values and
    the portfolio total. Items that cannot be priced carry an `error` instead.
    Every calculation is saved to the history.
    """
    try:
        use_case = CalculatePortfolioUseCase(resolver, repository)
        return use_case.execute(request.stocks)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        logger.error(f'Portfolio calculation error: {e!r}')
        raise HTTPException(status_code=500, detail='Internal server error. Please try again later.') from e


@router.get('/history',
            summary='List past portfolio calculations, newest first',
            response_model=List[HistoryEntry],
            response_model_exclude_none=True)
def get_history(repository: HistoryRepository = Depends(build_history_repository)):
    try:
        use_case = GetPortfolioHistoryUseCase(repository)
        return use_case.execute()
    except StorageError as e:
        logger.error(f'History retrieval error: {e}')
        raise HTTPException(status_code=500, detail='Unable to retrieve history') from e
