import time
from datetime import datetime
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from portfolio_api.utils.logger import logger


class PerformanceMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of every API call."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        try:
            response = await call_next(request)

            duration_ms = round((time.time() - start_time) * 1000, 2)

            log_data = {
                'timestamp': datetime.now().isoformat(),
                'method': request.method,
                'path': request.url.path,
                'status_code': response.status_code,
                'duration_ms': duration_ms
            }
            logger.log_request_json(log_data)

            response.headers['X-Response-Time'] = f'{duration_ms}ms'

            return response

        except Exception as e:
            duration_ms = round((time.time() - start_time) * 1000, 2)

            error_data = {
                'timestamp': datetime.now().isoformat(),
                'method': request.method,
                'path': request.url.path,
                'duration_ms': duration_ms,
                'error_type': type(e).__name__,
                'error_message': str(e)
            }
            logger.log_error_json(error_data)

            raise
