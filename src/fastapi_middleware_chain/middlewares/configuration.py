"""Configuration injection middleware."""

from __future__ import annotations

from starlette.responses import Response

from fastapi_middleware_chain._types import Handler
from fastapi_middleware_chain.config import AppConfig
from fastapi_middleware_chain.context import RequestContext
from fastapi_middleware_chain.middleware import Middleware


class ConfigInjection(Middleware):
    """Attaches the shared AppConfig to the context passed downstream."""

    def __init__(self, config: AppConfig) -> None:
        self._config = config

    async def dispatch(self, ctx: RequestContext, call_next: Handler) -> Response:
        return await call_next(ctx.with_config(self._config))
