"""FastAPI Middleware Chain - ordered middleware composition around a terminal handler."""

from fastapi_middleware_chain.app import build_chain, create_app
from fastapi_middleware_chain.chain import Chain, ResolvedChain
from fastapi_middleware_chain.config import AppConfig, Settings
from fastapi_middleware_chain.context import RequestContext
from fastapi_middleware_chain.endpoint import chain_endpoint
from fastapi_middleware_chain.exceptions import (
    ChainAbort,
    ChainException,
    ChainInternalError,
    ConfigurationUnavailable,
)
from fastapi_middleware_chain.handlers import Greeter
from fastapi_middleware_chain.middleware import (
    FunctionMiddleware,
    Middleware,
    middleware,
)
from fastapi_middleware_chain.middlewares import (
    ConfigInjection,
    CORSHeaders,
    JSONContentType,
    RequestLogging,
    Timing,
    TokenAuthentication,
)
from fastapi_middleware_chain.trace import ChainTrace, TraceEntry

__all__ = [
    "AppConfig",
    "CORSHeaders",
    "Chain",
    "ChainAbort",
    "ChainException",
    "ChainInternalError",
    "ChainTrace",
    "ConfigInjection",
    "ConfigurationUnavailable",
    "FunctionMiddleware",
    "Greeter",
    "JSONContentType",
    "Middleware",
    "RequestContext",
    "RequestLogging",
    "ResolvedChain",
    "Settings",
    "Timing",
    "TokenAuthentication",
    "TraceEntry",
    "build_chain",
    "chain_endpoint",
    "create_app",
    "middleware",
]
