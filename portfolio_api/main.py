from dotenv import load_dotenv
load_dotenv()

from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_api.presentation.middlewares.error_handlers import (
    http_exception_handler,
    request_validation_error_handler,
    unhandled_error_handler,
)
from portfolio_api.presentation.middlewares.performance_middleware import PerformanceMiddleware
from portfolio_api.presentation.routes import health, portfolio, stocks

STATIC_DIR = Path(__file__).parent / 'presentation' / 'static'


app = FastAPI(
    title='Portfolio Calculator API',
    version='1.0.0',
    description='Values stock portfolios with live market prices and keeps a history of past calculations.'
)

app.add_middleware(PerformanceMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

app.include_router(portfolio.router, prefix='/api', tags=['Portfolio'])
app.include_router(stocks.router, prefix='/api', tags=['Stocks'])
app.include_router(health.router, prefix='/api', tags=['Health'])

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)


@app.get('/', include_in_schema=False)
def root():
    return FileResponse(STATIC_DIR / 'index.html')
