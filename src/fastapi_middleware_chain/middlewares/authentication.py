"""Shared-secret token authentication."""

from __future__ import annotations

import hmac

from starlette.responses import PlainTextResponse, Response

from fastapi_middleware_chain._types import Handler
from fastapi_middleware_chain.context import RequestContext
from fastapi_middleware_chain.log import get_logger
from fastapi_middleware_chain.middleware import Middleware

logger = get_logger(__name__)


class TokenAuthentication(Middleware):
    """Rejects requests whose token header does not match the secret.

    A mismatch is answered with 401 here; nothing downstream runs.
    """

    def __init__(self, token: str, *, header: str = "X-Auth-Token") -> None:
        self._token = token.encode()
        self._header = header

    async def dispatch(self, ctx: RequestContext, call_next: Handler) -> Response:
        # Header values arrive latin-1 decoded; compare the bytes as sent
        supplied = ctx.request.headers.get(self._header)
        if supplied is None or not hmac.compare_digest(
            supplied.encode("latin-1"), self._token
        ):
            logger.warning(
                "Rejected %s %s: invalid %s",
                ctx.request.method,
                ctx.request.url.path,
                self._header,
            )
            return PlainTextResponse("Unauthorized", status_code=401)

        logger.info("Verified token")
        return await call_next(ctx)
