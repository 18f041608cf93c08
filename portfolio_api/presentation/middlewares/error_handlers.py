from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_api.domain.usecases.portfolio.calculate_portfolio import INVALID_INPUT_ERROR
from portfolio_api.utils.logger import logger


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if isinstance(exc, StarletteHTTPException):
        # Raised by the router itself when no route matches the path or the method
        if (exc.status_code == 404 and exc.detail == 'Not Found') or exc.status_code == 405:
            return JSONResponse(status_code=404, content={'error': 'Endpoint not found'})
        return JSONResponse(
            status_code=exc.status_code,
            content={'error': exc.detail},
            headers=getattr(exc, 'headers', None)
        )
    return await unhandled_error_handler(request, exc)


async def request_validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if isinstance(exc, RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={
                'error': INVALID_INPUT_ERROR,
                'errors': [
                    {
                        'loc': list(err['loc']),
                        'msg': err['msg'],
                        'type': err['type']
                    } for err in exc.errors()
                ]
            }
        )
    return await unhandled_error_handler(request, exc)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f'Unhandled error on {request.method} {request.url.path}: {exc!r}')
    return JSONResponse(
        status_code=500,
        content={'error': 'Internal server error'}
    )
