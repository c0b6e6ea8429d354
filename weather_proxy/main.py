from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from weather_proxy.api import routes
from weather_proxy.api.errors import register_exception_handlers
from weather_proxy.config import Settings, get_settings
from weather_proxy.middleware.request_tracker import RequestTrackerMiddleware
from weather_proxy.models.responses import ServiceInfoResponse
from weather_proxy.services.upstream_client import OpenWeatherClient
from weather_proxy.utils.logger import setup_logger

logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(
        "Starting Weather Proxy API...",
        extra={
            "environment": settings.environment,
            "api_key_configured": settings.api_key_configured,
        },
    )
    if not settings.api_key_configured:
        logger.error(
            "OPENWEATHER_API_KEY is not set; weather endpoints will answer 500",
            extra={"event": "config_error"},
        )

    yield

    logger.info("Shutting down Weather Proxy API...")
    await app.state.upstream_client.close()


def create_app(
    settings: Optional[Settings] = None,
    upstream_client: Optional[OpenWeatherClient] = None,
) -> FastAPI:
    """
    Build the application around an explicit settings object.

    Args:
        settings: Configuration (defaults to the environment-derived settings)
        upstream_client: Provider client (defaults to one built from settings)
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.upstream_client = upstream_client or OpenWeatherClient.from_settings(settings)

    app.add_middleware(RequestTrackerMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    if settings.enable_metrics:
        Instrumentator().instrument(app).expose(app, endpoint="/prometheus-metrics")

    app.include_router(routes.router, prefix=settings.api_prefix)
    # Unprefixed aliases for clients that call the routes at the root
    app.include_router(routes.router, prefix="", include_in_schema=False)

    @app.get("/", response_model=ServiceInfoResponse, tags=["root"])
    async def root() -> ServiceInfoResponse:
        prefix = settings.api_prefix
        return ServiceInfoResponse(
            message=settings.app_name,
            version=settings.app_version,
            status="Running",
            endpoints={
                "health": f"{prefix}/health",
                "weather": f"{prefix}/weather?city=London",
                "forecast": f"{prefix}/forecast?city=London",
                "location": f"{prefix}/location?lat=40.7128&lon=-74.0060",
                "suggestions": f"{prefix}/suggestions?query=Lon",
            },
            documentation="/docs",
        )

    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "weather_proxy.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
