
from fastapi.routing import APIRoute
from fastapi import Request, Response
from typing import Callable
from portfolio_api.utils.logger import logger

class DefaultRouter(APIRoute):
    def get_route_handler(self) -> Callable:  # noqa: C901
        original_route_handler = super().get_route_handler()

        async def custom_route_handler(request: Request) -> Response:
            try:
                if await request.body():
                    try:
                        body = await request.json()
                        logger.info(f'Received Body: {body}')
                    except ValueError:
                        logger.info('Received Body: <not JSON>')
                query = request.query_params
                if query:
                    logger.info(f'Received Query: {query}')
                response: Response = await original_route_handler(request)
                logger.info(f'Response Body: {getattr(response, "body", b"")}')
            except BaseException as error:
                logger.error(f'Error: {error!r}')
                raise error

            return response

        return custom_route_handler
