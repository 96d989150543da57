"""HTTP utilities public API (barrel module).

This package provides:
- The response wrapper returned by every client call
- Decode modes for successful response bodies
- Rate-limit header parsing
- Query string encoding for options models
- Construction of the default HTTP transport

Recommended import pattern for consumers:
    from mailerlite.utils.http import Response, RateLimit, build_async_client
"""

from .decode import DecodeMode
from .query import add_options
from .response import (
    HEADER_RATE_LIMIT,
    HEADER_RATE_REMAINING,
    RateLimit,
    Response,
    parse_rate_limit,
)
from .transport import build_async_client, create_limits, create_timeout

__all__ = [
    "DecodeMode",
    "add_options",
    "Response",
    "RateLimit",
    "parse_rate_limit",
    "HEADER_RATE_LIMIT",
    "HEADER_RATE_REMAINING",
    "build_async_client",
    "create_timeout",
    "create_limits",
]
