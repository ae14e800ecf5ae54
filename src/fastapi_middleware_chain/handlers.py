"""Terminal request handlers."""

from __future__ import annotations

import asyncio

from starlette.responses import Response

from fastapi_middleware_chain.config import AppConfig
from fastapi_middleware_chain.context import RequestContext
from fastapi_middleware_chain.exceptions import ConfigurationUnavailable
from fastapi_middleware_chain.log import get_logger

logger = get_logger(__name__)


class Greeter:
    """Greets with the configured application name after a fixed delay."""

    def __init__(self, *, delay: float = 2.0) -> None:
        self._delay = delay

    async def __call__(self, ctx: RequestContext) -> Response:
        config = ctx.config
        if not isinstance(config, AppConfig):
            raise ConfigurationUnavailable()

        logger.info("Serving greeting for %s", config.app)
        # Simulated processing
        await asyncio.sleep(self._delay)
        return Response(content=f"Hello, I'm {config.app}")
