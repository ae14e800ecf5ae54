"""Response header middlewares — JSON content type and CORS."""

from __future__ import annotations

from collections.abc import Sequence

from starlette.responses import Response

from fastapi_middleware_chain._types import Handler
from fastapi_middleware_chain.context import RequestContext
from fastapi_middleware_chain.middleware import Middleware

DEFAULT_ALLOW_METHODS = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
DEFAULT_ALLOW_HEADERS = ("Content-Type", "Authorization")


class JSONContentType(Middleware):
    """Labels outgoing responses as JSON.

    Responses that already declare a media type, such as plain-text errors
    produced further in, keep it.
    """

    media_type = "application/json"

    async def dispatch(self, ctx: RequestContext, call_next: Handler) -> Response:
        response = await call_next(ctx)
        response.headers.setdefault("content-type", self.media_type)
        return response


class CORSHeaders(Middleware):
    """Permissive CORS headers on every response; answers preflight itself."""

    def __init__(
        self,
        *,
        allow_origin: str = "*",
        allow_methods: Sequence[str] = DEFAULT_ALLOW_METHODS,
        allow_headers: Sequence[str] = DEFAULT_ALLOW_HEADERS,
    ) -> None:
        self._headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": ", ".join(allow_methods),
            "Access-Control-Allow-Headers": ", ".join(allow_headers),
        }

    async def dispatch(self, ctx: RequestContext, call_next: Handler) -> Response:
        if ctx.request.method == "OPTIONS":
            return Response(status_code=204, headers=self._headers)

        response = await call_next(ctx)
        response.headers.update(self._headers)
        return response
