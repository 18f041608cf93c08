"""
Process entry point: ``portfolio-api`` or ``python -m portfolio_api``.

uvicorn owns SIGINT/SIGTERM handling; the graceful shutdown timeout is zero,
so in-flight requests are not drained.
"""

import uvicorn

from portfolio_api.config.settings import get_settings
from portfolio_api.main import app
from portfolio_api.utils.logger import logger

ENDPOINTS = [
    ('POST', '/api/portfolio', 'Calculate portfolio value'),
    ('GET ', '/api/history', 'Get calculation history'),
    ('GET ', '/api/stock/:symbol', 'Get single stock price'),
    ('GET ', '/api/health', 'Health check'),
]


def main():
    settings = get_settings()

    logger.info(f'Portfolio Calculator Server running on http://localhost:{settings.port}')
    for method, path, description in ENDPOINTS:
        logger.info(f'   {method} {path} - {description}')
    if not settings.twelve_data_api_key:
        logger.warning('TWELVE_DATA_API_KEY is not set, TwelveData lookups will fail')

    uvicorn.run(app, host=settings.host, port=settings.port, timeout_graceful_shutdown=0)
    logger.info('Server shut down')


if __name__ == '__main__':
    main()
