"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from starlette.responses import Response

if TYPE_CHECKING:
    from fastapi_middleware_chain.context import RequestContext

# A stage of the chain: the terminal handler, or a middleware bound to its successor
Handler = Callable[["RequestContext"], Awaitable[Response]]

# Signature of a plain function lifted into a middleware
DispatchFunction = Callable[["RequestContext", Handler], Awaitable[Response]]
