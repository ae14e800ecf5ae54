"""Chain class — ordered container and composition engine for Middlewares."""

from __future__ import annotations

import time
from dataclasses import dataclass
from functools import reduce

from starlette.responses import PlainTextResponse, Response

from fastapi_middleware_chain._types import Handler
from fastapi_middleware_chain.context import RequestContext
from fastapi_middleware_chain.exceptions import (
    ChainAbort,
    ChainException,
    ChainInternalError,
)
from fastapi_middleware_chain.log import get_logger
from fastapi_middleware_chain.middleware import Middleware
from fastapi_middleware_chain.trace import TraceEntry

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResolvedChain:
    """Immutable, pre-computed execution plan."""

    middlewares: tuple[Middleware, ...]
    debug: bool = False

    def compose(self, terminal: Handler) -> Handler:
        """Fold the middlewares around ``terminal`` into one handler.

        The first registered middleware ends up innermost, so the last
        registered one is the first to see an inbound request.
        """
        handler = _guard(_terminal_stage(terminal))
        return reduce(_wrap, self.middlewares, handler)


class Chain:
    """Ordered container of Middleware instances."""

    def __init__(self, *middlewares: Middleware | Chain, debug: bool = False) -> None:
        self._items: list[Middleware | Chain] = list(middlewares)
        self._debug = debug
        self._resolved: ResolvedChain | None = None

    def add(self, *middlewares: Middleware | Chain) -> Chain:
        self._items.extend(middlewares)
        self._resolved = None
        return self

    def resolve(self) -> ResolvedChain:
        if self._resolved is not None:
            return self._resolved

        flat: list[Middleware] = []
        self._flatten(self._items, flat)

        self._resolved = ResolvedChain(middlewares=tuple(flat), debug=self._debug)
        return self._resolved

    @staticmethod
    def _flatten(items: list[Middleware | Chain], out: list[Middleware]) -> None:
        for item in items:
            if isinstance(item, Chain):
                Chain._flatten(item._items, out)
            else:
                out.append(item)


def _wrap(call_next: Handler, middleware: Middleware) -> Handler:
    return _guard(_stage(middleware, call_next))


def _stage(middleware: Middleware, call_next: Handler) -> Handler:
    name = middleware.name

    async def stage(ctx: RequestContext) -> Response:
        trace = ctx.trace
        if trace is None:
            return await middleware.dispatch(ctx, call_next)

        trace.entered.append(name)
        delegated = False

        async def downstream(inner: RequestContext) -> Response:
            nonlocal delegated
            delegated = True
            return await call_next(inner)

        start = time.perf_counter()
        try:
            response = await middleware.dispatch(ctx, downstream)
        except Exception as exc:
            elapsed = (time.perf_counter() - start) * 1000
            trace.entries.append(TraceEntry(name, elapsed, "FAILED", _reason(exc)))
            raise
        elapsed = (time.perf_counter() - start) * 1000
        outcome = "OK" if delegated else "SHORT_CIRCUIT"
        trace.entries.append(TraceEntry(name, elapsed, outcome))
        return response

    return stage


def _terminal_stage(terminal: Handler) -> Handler:
    name = getattr(terminal, "__name__", type(terminal).__name__)

    async def stage(ctx: RequestContext) -> Response:
        trace = ctx.trace
        if trace is None:
            return await terminal(ctx)

        trace.entered.append(name)
        start = time.perf_counter()
        try:
            response = await terminal(ctx)
        except Exception as exc:
            elapsed = (time.perf_counter() - start) * 1000
            trace.entries.append(TraceEntry(name, elapsed, "FAILED", _reason(exc)))
            raise
        elapsed = (time.perf_counter() - start) * 1000
        trace.entries.append(TraceEntry(name, elapsed, "OK"))
        return response

    return stage


def _guard(handler: Handler) -> Handler:
    """Turn aborts and unexpected errors into responses for the enclosing stage."""

    async def guarded(ctx: RequestContext) -> Response:
        try:
            return await handler(ctx)
        except ChainAbort as exc:
            _record_error(ctx, exc)
            return PlainTextResponse(exc.detail, status_code=exc.status_code)
        except Exception as exc:
            wrapped = ChainInternalError("Internal chain error", cause=exc)
            _record_error(ctx, wrapped)
            logger.exception(
                "Unhandled error in %s %s", ctx.request.method, ctx.request.url.path
            )
            return PlainTextResponse(wrapped.detail, status_code=500)

    return guarded


def _reason(exc: Exception) -> str:
    if isinstance(exc, ChainAbort):
        return exc.detail
    return str(exc)


def _record_error(ctx: RequestContext, error: ChainException) -> None:
    # Innermost failure wins; outer stages only see its response
    if ctx.trace is not None and ctx.trace.error is None:
        ctx.trace.error = error
