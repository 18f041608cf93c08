from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase names on the wire and in storage."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StockRequestItem(CamelModel):
    """One holding as sent by the client; validity is checked per item."""
    symbol: Optional[str] = Field(default=None, description='Ticker, e.g. AAPL')
    quantity: Optional[Union[int, float]] = Field(default=None, description='Number of shares held')


class PortfolioRequest(CamelModel):
    """Body of POST /api/portfolio."""
    stocks: Optional[List[StockRequestItem]] = Field(default=None, description='Holdings to value')


class StockResult(CamelModel):
    """Priced line item, or the reason it could not be priced."""
    symbol: str
    quantity: Optional[Union[int, float]] = None
    current_price: Optional[str] = None
    total_value: Optional[str] = None
    error: Optional[str] = None


class PortfolioResponse(CamelModel):
    stocks: List[StockResult]
    total_portfolio_value: str
    timestamp: str


class HistoryEntry(PortfolioResponse):
    """A persisted calculation, identified by its epoch-millisecond id."""
    id: int
