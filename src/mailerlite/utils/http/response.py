"""Response wrapper for MailerLite API calls.

This module wraps ``httpx.Response`` objects so the client can hand
callers a stable response type. It also parses the rate-limit headers
MailerLite attaches to its responses.
"""

from dataclasses import dataclass
from typing import Any, Optional

import httpx

HEADER_RATE_LIMIT = "X-RateLimit-Limit"
HEADER_RATE_REMAINING = "X-RateLimit-Remaining"


@dataclass(frozen=True)
class RateLimit:
    """Rate-limit state reported by the API on one response.

    :param limit: Number of requests allowed in the current window
    :type limit: int
    :param remaining: Number of requests left in the current window
    :type remaining: int
    """

    limit: int
    remaining: int


def parse_rate_limit(headers: httpx.Headers) -> Optional[RateLimit]:
    """Parse rate-limit headers.

    :param headers: Response headers
    :type headers: httpx.Headers
    :return: RateLimit when both headers are present and numeric, else None
    :rtype: Optional[RateLimit]
    """
    limit = headers.get(HEADER_RATE_LIMIT)
    remaining = headers.get(HEADER_RATE_REMAINING)
    if limit is None or remaining is None:
        return None
    try:
        return RateLimit(limit=int(limit), remaining=int(remaining))
    except ValueError:
        return None


class Response:
    """Wrapper for MailerLite API responses with convenient access methods.

    This class wraps httpx.Response objects and provides easy access
    to common response properties. It includes caching for JSON
    responses to avoid repeated parsing.
    """

    def __init__(self, response: httpx.Response):
        """Initialize the response wrapper.

        :param response: The underlying httpx.Response object
        :type response: httpx.Response
        """
        self.response = response
        self.rate_limit: Optional[RateLimit] = parse_rate_limit(response.headers)
        self._json_cache = None

    @property
    def status_code(self) -> int:
        """Get the HTTP status code of the response.

        :return: HTTP status code
        :rtype: int
        """
        return self.response.status_code

    @property
    def headers(self) -> httpx.Headers:
        """Get the response headers.

        :return: Response headers
        :rtype: httpx.Headers
        """
        return self.response.headers

    @property
    def request(self) -> httpx.Request:
        """Get the request that produced this response."""
        return self.response.request

    @property
    def content(self) -> bytes:
        """Get the raw response body."""
        return self.response.content

    @property
    def text(self) -> str:
        """Get the response body as text.

        :return: Response body text
        :rtype: str
        """
        return self.response.text

    def json(self) -> Any:
        """Get the response body as parsed JSON.

        The result is cached to avoid repeated parsing of the same
        response body.

        :return: Parsed JSON response
        :rtype: Any
        """
        if self._json_cache is None:
            self._json_cache = self.response.json()
        return self._json_cache

    def is_success(self) -> bool:
        """Check if the response indicates success (2xx status code).

        :return: True if status code is in 200-299 range
        :rtype: bool
        """
        return 200 <= self.status_code < 300

    def is_client_error(self) -> bool:
        """Check if the response indicates a client error (4xx status code).

        :return: True if status code is in 400-499 range
        :rtype: bool
        """
        return 400 <= self.status_code < 500

    def is_server_error(self) -> bool:
        """Check if the response indicates a server error (5xx status code).

        :return: True if status code is in 500-599 range
        :rtype: bool
        """
        return 500 <= self.status_code < 600

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}]>"
