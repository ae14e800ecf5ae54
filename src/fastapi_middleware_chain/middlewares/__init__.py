"""Built-in middlewares."""

from fastapi_middleware_chain.middlewares.authentication import TokenAuthentication
from fastapi_middleware_chain.middlewares.configuration import ConfigInjection
from fastapi_middleware_chain.middlewares.headers import CORSHeaders, JSONContentType
from fastapi_middleware_chain.middlewares.request_logging import RequestLogging, Timing

__all__ = [
    "CORSHeaders",
    "ConfigInjection",
    "JSONContentType",
    "RequestLogging",
    "Timing",
    "TokenAuthentication",
]
