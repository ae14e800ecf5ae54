"""Application factory wiring settings, the middleware chain and routes."""

from __future__ import annotations

from fastapi import FastAPI

from fastapi_middleware_chain.chain import Chain
from fastapi_middleware_chain.config import AppConfig, Settings
from fastapi_middleware_chain.endpoint import chain_endpoint
from fastapi_middleware_chain.handlers import Greeter
from fastapi_middleware_chain.middlewares import (
    ConfigInjection,
    CORSHeaders,
    JSONContentType,
    RequestLogging,
    Timing,
    TokenAuthentication,
)


def build_chain(settings: Settings, config: AppConfig) -> Chain:
    """Default chain. The last entry is the first to see a request."""
    return Chain(
        ConfigInjection(config),
        RequestLogging(),
        Timing(),
        TokenAuthentication(settings.AUTH_TOKEN, header=settings.AUTH_HEADER),
        JSONContentType(),
        CORSHeaders(),
        debug=settings.DEBUG,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    config = settings.app_config()

    endpoint = chain_endpoint(
        build_chain(settings, config),
        Greeter(delay=settings.PROCESSING_DELAY),
    )

    app = FastAPI(title=settings.APP_NAME)
    app.add_api_route("/", endpoint, methods=["GET"])
    # Preflight on any path is answered by the CORS stage
    app.add_api_route(
        "/{path:path}", endpoint, methods=["OPTIONS"], include_in_schema=False
    )
    return app
