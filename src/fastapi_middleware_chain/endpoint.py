"""chain_endpoint() — factory producing Starlette/FastAPI endpoints from a chain."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import Response

from fastapi_middleware_chain._types import Handler
from fastapi_middleware_chain.chain import Chain
from fastapi_middleware_chain.context import RequestContext
from fastapi_middleware_chain.log import get_logger
from fastapi_middleware_chain.trace import ChainTrace

logger = get_logger(__name__)

Endpoint = Callable[[Request], Awaitable[Response]]


def chain_endpoint(chain: Chain, handler: Handler) -> Endpoint:
    """Compose ``chain`` around ``handler`` once and return a route endpoint."""
    resolved = chain.resolve()
    composed = resolved.compose(handler)

    if resolved.debug:
        endpoint = _make_debug_endpoint(composed)
    else:
        endpoint = _make_endpoint(composed)

    endpoint._chain_resolved = resolved  # type: ignore[attr-defined]
    return endpoint


def _make_endpoint(composed: Handler) -> Endpoint:
    async def endpoint(request: Request) -> Response:
        return await composed(RequestContext(request=request))

    return endpoint


def _make_debug_endpoint(composed: Handler) -> Endpoint:
    async def endpoint(request: Request) -> Response:
        trace = ChainTrace()
        start = time.perf_counter()
        response = await composed(RequestContext(request=request, trace=trace))
        trace.total_duration_ms = (time.perf_counter() - start) * 1000
        trace.status_code = response.status_code
        request.state.chain_trace = trace
        logger.debug(
            "Chain %s -> %s took %.3fms",
            " > ".join(trace.entered),
            response.status_code,
            trace.total_duration_ms,
        )
        return response

    return endpoint
