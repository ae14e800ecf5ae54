"""Shared pytest fixtures for fastapi-middleware-chain tests."""

from __future__ import annotations

from typing import Any

import pytest
from starlette.requests import Request
from starlette.responses import Response

from fastapi_middleware_chain.config import AppConfig, Settings
from fastapi_middleware_chain.context import RequestContext
from fastapi_middleware_chain.trace import ChainTrace


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        client: tuple[str, int] | None = ("127.0.0.1", 51000),
        query_string: str = "",
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
            "client": client,
        }
        return Request(scope)

    return _make


@pytest.fixture
def make_ctx(make_request: Any) -> Any:
    """Factory for RequestContext objects, optionally traced."""

    def _make(*, traced: bool = False, **kwargs: Any) -> RequestContext:
        trace = ChainTrace() if traced else None
        return RequestContext(request=make_request(**kwargs), trace=trace)

    return _make


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(app="TestApp")


@pytest.fixture
def settings() -> Settings:
    """Settings with the processing delay removed."""
    return Settings(APP_NAME="TestApp", PROCESSING_DELAY=0)


@pytest.fixture
def ok_handler() -> Any:
    """Terminal handler that records whether it ran."""

    class _Handler:
        def __init__(self) -> None:
            self.calls: list[RequestContext] = []

        async def __call__(self, ctx: RequestContext) -> Response:
            self.calls.append(ctx)
            return Response(content="ok")

    return _Handler()
