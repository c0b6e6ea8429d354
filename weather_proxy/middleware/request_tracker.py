import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from weather_proxy.utils.logger import setup_logger

logger = setup_logger(__name__)

GENERIC_ERROR_BODY = {
    "error": "Internal server error",
    "details": "Something went wrong on our end",
}


class RequestTrackerMiddleware(BaseHTTPMiddleware):
    """
    Middleware that tracks requests by adding:
    - Unique request ID for tracing
    - Processing time measurement
    - Structured logging of requests
    - A generic JSON 500 for anything the exception handlers did not catch
    """

    async def dispatch(self, request: Request, call_next):
        request_id = f"req_{uuid.uuid4().hex[:8]}_{int(time.time() * 1000)}"
        request.state.request_id = request_id

        start_time = time.time()
        logger.info(
            "Incoming request",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "client": request.client.host if request.client else "unknown",
            },
        )

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            # Type only: messages from upstream libraries may embed request URLs.
            logger.error(
                "Unhandled error",
                extra={
                    "request_id": request_id,
                    "process_time": process_time,
                    "error_type": type(e).__name__,
                },
            )
            return JSONResponse(
                status_code=500,
                content=GENERIC_ERROR_BODY,
                headers={
                    "X-Process-Time": f"{process_time:.3f}",
                    "X-Request-ID": request_id,
                },
            )

        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.3f}"
        response.headers["X-Request-ID"] = request_id
        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "status_code": response.status_code,
                "process_time": process_time,
            },
        )
        return response
