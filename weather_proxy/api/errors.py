"""
Exception handlers turning facade errors into JSON error bodies.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from weather_proxy.exceptions import WeatherServiceException
from weather_proxy.utils.logger import setup_logger

logger = setup_logger(__name__)


def _request_id(request: Request):
    return getattr(request.state, "request_id", None)


async def weather_exception_handler(
    request: Request, exc: WeatherServiceException
) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "Request failed",
        extra={
            "event": "api_error",
            "path": request.url.path,
            "error": exc.error,
            "error_type": type(exc).__name__,
            "status_code": exc.status_code,
            "request_id": _request_id(request),
        },
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = []
    for error in exc.errors():
        field = error.get("loc", ["query"])[-1]
        problems.append(f"{field}: {error.get('msg')}")

    logger.warning(
        "Invalid request parameters",
        extra={
            "event": "validation_error",
            "path": request.url.path,
            "request_id": _request_id(request),
        },
    )
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request parameters", "details": "; ".join(problems)},
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == 404:
        content = {
            "error": "Endpoint not found",
            "details": f"The route {request.url.path} does not exist",
        }
    else:
        content = {"error": str(exc.detail)}
    return JSONResponse(
        status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None)
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WeatherServiceException, weather_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
