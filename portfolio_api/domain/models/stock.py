from pydantic import BaseModel


class StockQuote(BaseModel):
    """Current price of a single symbol."""
    symbol: str
    price: str
    timestamp: str
