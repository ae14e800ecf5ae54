"""Request logging and timing middlewares."""

from __future__ import annotations

import time

from starlette.requests import Request
from starlette.responses import Response

from fastapi_middleware_chain._types import Handler
from fastapi_middleware_chain.context import RequestContext
from fastapi_middleware_chain.log import get_logger
from fastapi_middleware_chain.middleware import Middleware


def _target(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def _client_address(request: Request) -> str:
    client = request.client
    if client is None:
        return "unknown"
    return f"{client.host}:{client.port}"


class RequestLogging(Middleware):
    """Logs method, path and remote address before delegating."""

    def __init__(self, logger_name: str = "fastapi_middleware_chain.requests") -> None:
        self._logger = get_logger(logger_name)

    async def dispatch(self, ctx: RequestContext, call_next: Handler) -> Response:
        request = ctx.request
        self._logger.info(
            "Received %s request: %s from address: %s",
            request.method,
            _target(request),
            _client_address(request),
        )
        return await call_next(ctx)


class Timing(Middleware):
    """Logs the wall-clock duration of everything downstream."""

    def __init__(self, logger_name: str = "fastapi_middleware_chain.timing") -> None:
        self._logger = get_logger(logger_name)

    async def dispatch(self, ctx: RequestContext, call_next: Handler) -> Response:
        start = time.perf_counter()
        response = await call_next(ctx)
        duration_ms = (time.perf_counter() - start) * 1000
        self._logger.info(
            "Request took %.3fms",
            duration_ms,
            extra={"duration_ms": round(duration_ms, 3), "path": ctx.request.url.path},
        )
        return response
