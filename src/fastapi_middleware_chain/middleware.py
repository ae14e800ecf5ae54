"""Middleware abstract base class and function adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod

from starlette.responses import Response

from fastapi_middleware_chain._types import DispatchFunction, Handler
from fastapi_middleware_chain.context import RequestContext


class Middleware(ABC):
    """Base abstraction for every stage wrapped around the terminal handler."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    async def dispatch(self, ctx: RequestContext, call_next: Handler) -> Response: ...


class FunctionMiddleware(Middleware):
    """Adapts a plain ``async def fn(ctx, call_next)`` into a Middleware."""

    def __init__(self, func: DispatchFunction, *, name: str | None = None) -> None:
        self._func = func
        self._name = name or getattr(func, "__name__", type(self).__name__)

    @property
    def name(self) -> str:
        return self._name

    async def dispatch(self, ctx: RequestContext, call_next: Handler) -> Response:
        return await self._func(ctx, call_next)


def middleware(func: DispatchFunction) -> FunctionMiddleware:
    """Decorator form of FunctionMiddleware."""
    return FunctionMiddleware(func)
