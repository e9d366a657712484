"""
Request logging middleware for tracking HTTP requests.
"""
import time
import uuid
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from wordcheck.utils.logger import get_logger

logger = get_logger("middleware")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for logging HTTP requests and responses.

    Logs:
    - Request method and path
    - Response status code
    - Request processing time
    - Request ID for tracing
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable
    ) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        logger.debug(
            "Request started",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                request_id=request_id,
                method=request.method,
                path=request.url.path,
                duration_ms=f"{(time.time() - start_time) * 1000:.2f}",
                error=str(e),
                exc_info=True
            )
            raise

        logger.info(
            "Request completed",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=f"{(time.time() - start_time) * 1000:.2f}"
        )

        response.headers["X-Request-ID"] = request_id
        return response
