"""RequestContext — per-request state passed through the chain."""

from __future__ import annotations

from dataclasses import dataclass, replace

from starlette.requests import Request

from fastapi_middleware_chain.config import AppConfig
from fastapi_middleware_chain.trace import ChainTrace


@dataclass(frozen=True)
class RequestContext:
    """Immutable per-request value handed from stage to stage.

    Stages that enrich the context pass a new instance downstream instead of
    mutating the one they received.
    """

    request: Request
    config: AppConfig | None = None
    trace: ChainTrace | None = None

    def with_config(self, config: AppConfig) -> RequestContext:
        return replace(self, config=config)
