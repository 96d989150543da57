"""Client for the MailerLite API.

This module provides the ``Client`` that every resource service talks
through. The client owns the connection configuration and a single
request/response pipeline:

- ``new_request`` resolves a relative path against the base URL, encodes
  an optional JSON body and sets the MailerLite headers
- ``bare_do`` sends the request, prefers task cancellation over
  transport failures and turns non-2xx responses into ``APIError``
- ``do`` additionally decodes the body according to a ``DecodeMode``

Examples:
    >>> async with Client("api-key") as client:
    ...     fields, response = await client.fields.list()
"""

import asyncio
import json
import logging
import threading
from functools import lru_cache
from typing import Any, BinaryIO, Dict, Optional, Tuple, Union

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .config.settings import MailerLiteSettings
from .exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    RequestBuildError,
    TransportError,
)
from .models.base_models import ErrorDetail, ErrorResponse
from .services import (
    CampaignsService,
    FieldsService,
    GroupsService,
    SegmentsService,
    SettingsService,
    StatsService,
    SubscribersService,
    WebhooksService,
)
from .utils.http import (
    DecodeMode,
    RateLimit,
    Response,
    add_options,
    build_async_client,
)

logger = logging.getLogger(__name__)

HEADER_API_KEY = "X-MailerLite-ApiKey"

# MailerLite v2 reports a single rate-limit window for the whole API.
RATE_LIMIT_CATEGORY = "core"

__all__ = [
    "Client",
    "DecodeMode",
    "HEADER_API_KEY",
    "RATE_LIMIT_CATEGORY",
    "add_options",
    "check_response",
]


@lru_cache(maxsize=None)
def _type_adapter(into: Any) -> TypeAdapter:
    return TypeAdapter(into)


def _cancel_count() -> int:
    task = asyncio.current_task()
    return task.cancelling() if task is not None else 0


def check_response(response: Response) -> None:
    """Check an API response for errors.

    A response is an error when its status code is outside 200-299. The
    body is expected to hold ``{"error": {"code": ..., "message": ...}}``.
    Each member is decoded on its own; a member that is missing or
    mistyped, or a body that is not JSON at all, leaves a zero code or an
    empty message on the raised error.

    :param response: Response to check
    :type response: Response
    :raises APIError: If the status code is not 2xx
    """
    if response.is_success():
        return

    error = ErrorDetail()
    try:
        error = ErrorResponse.model_validate_json(response.content).error
    except PydanticValidationError as e:
        logger.debug(
            "Could not decode error body of %s response: %s",
            response.status_code,
            e.errors(include_url=False)[:1],
        )

    raise APIError(response, error)


class Client:
    """Manages communication with the MailerLite API.

    The client is safe to share between concurrent tasks: every call
    builds its own request and the underlying ``httpx.AsyncClient``
    handles concurrent use.

    :param api_key: API key that authenticates each request
    :type api_key: Optional[str]
    :param base_url: Base URL for API requests, must end with a slash
    :type base_url: Optional[Union[str, httpx.URL]]
    :param user_agent: User agent sent with each request
    :type user_agent: Optional[str]
    :param http_client: HTTP transport to use instead of a new one
    :type http_client: Optional[httpx.AsyncClient]
    :param settings: Settings used for options not passed explicitly
    :type settings: Optional[MailerLiteSettings]
    :raises ConfigurationError: If the base URL is invalid
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[Union[str, httpx.URL]] = None,
        user_agent: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        settings: Optional[MailerLiteSettings] = None,
    ):
        if settings is None:
            try:
                settings = MailerLiteSettings()
            except PydanticValidationError as e:
                raise ConfigurationError(f"invalid MailerLite settings: {e}") from e

        self._api_key = api_key if api_key is not None else (settings.api_key or "")
        if not self._api_key:
            logger.warning("No MailerLite API key configured; requests will be rejected")

        raw_base_url = str(base_url) if base_url is not None else settings.base_url
        try:
            self._base_url = httpx.URL(raw_base_url)
        except (httpx.InvalidURL, ValueError) as e:
            raise ConfigurationError(
                f"invalid base URL {raw_base_url!r}: {e}", setting="base_url"
            ) from e
        if not self._base_url.path.endswith("/"):
            raise ConfigurationError(
                f"base URL must have a trailing slash, but {raw_base_url!r} does not",
                setting="base_url",
            )

        self._user_agent = user_agent or settings.user_agent

        self._owns_http_client = http_client is None
        self._http = http_client if http_client is not None else build_async_client(settings)

        self._rate_limits: Dict[str, RateLimit] = {}
        self._rate_lock = threading.Lock()

        # Services for the different parts of the MailerLite API
        self.campaigns = CampaignsService(self)
        self.segments = SegmentsService(self)
        self.subscribers = SubscribersService(self)
        self.groups = GroupsService(self)
        self.fields = FieldsService(self)
        self.webhooks = WebhooksService(self)
        self.stats = StatsService(self)
        self.settings = SettingsService(self)

    @property
    def base_url(self) -> httpx.URL:
        """Get the base URL requests are resolved against."""
        return self._base_url

    @property
    def user_agent(self) -> str:
        """Get the user agent sent with each request."""
        return self._user_agent

    @property
    def api_key(self) -> str:
        """Get the API key sent with each request."""
        return self._api_key

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP transport if this client created it."""
        if self._owns_http_client:
            await self._http.aclose()

    def rate_limits(self) -> Dict[str, RateLimit]:
        """Get the most recent rate-limit state reported per category.

        The values are informational only; calls are never delayed or
        rejected based on them.

        :return: Snapshot of rate-limit records keyed by category
        :rtype: Dict[str, RateLimit]
        """
        with self._rate_lock:
            return dict(self._rate_limits)

    def new_request(self, method: str, url: str, body: Any = None) -> httpx.Request:
        """Create an API request.

        ``url`` is resolved relative to the base URL and should not start
        with a slash. If ``body`` is given it is JSON encoded without
        escaping; pydantic models are dumped without their unset members.

        :param method: HTTP method
        :type method: str
        :param url: Relative URL, optionally with a query string
        :type url: str
        :param body: Optional request body
        :type body: Any
        :return: Request ready to be sent
        :rtype: httpx.Request
        :raises RequestBuildError: If the URL or body is invalid
        """
        try:
            resolved = self._base_url.join(url)
        except (httpx.InvalidURL, ValueError) as e:
            raise RequestBuildError(f"invalid request URL {url!r}", original_error=e) from e

        headers = {
            HEADER_API_KEY: self._api_key,
            "Accept": "application/json",
        }

        content = None
        if body is not None:
            if isinstance(body, BaseModel):
                body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
            try:
                content = json.dumps(body, ensure_ascii=False).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise RequestBuildError(
                    "request body is not JSON serializable", original_error=e
                ) from e
            headers["Content-Type"] = "application/json"

        if self._user_agent:
            headers["User-Agent"] = self._user_agent

        return self._http.build_request(method, resolved, headers=headers, content=content)

    async def bare_do(self, request: httpx.Request) -> Response:
        """Send an API request and check the response for errors.

        If the calling task is being cancelled, cancellation wins: a
        pending cancellation is delivered before sending, and one requested
        while the request is in flight replaces any transport failure. A
        cancellation the task caught earlier without ``uncancel()`` does not
        affect later calls.

        :param request: Request built by ``new_request``
        :type request: httpx.Request
        :return: The wrapped response
        :rtype: Response
        :raises asyncio.CancelledError: If the calling task is being cancelled
        :raises TransportError: If the transport fails
        :raises APIError: If the response status is not 2xx
        """
        # Checkpoint: delivers a cancellation requested before the call.
        await asyncio.sleep(0)
        cancels_before = _cancel_count()

        logger.debug("=== SEND: %s %s", request.method, request.url)
        if logger.isEnabledFor(logging.DEBUG):
            for k, v in request.headers.items():
                if k.lower() == HEADER_API_KEY.lower():
                    logger.debug("  %s: [REDACTED]", k)
                else:
                    logger.debug("  %s: %s", k, v)

        try:
            raw = await self._http.send(request)
        except httpx.RequestError as e:
            if _cancel_count() > cancels_before:
                logger.debug(
                    "Transport failed for cancelled call %s %s: %s",
                    request.method,
                    request.url,
                    e,
                )
                raise asyncio.CancelledError() from e
            logger.debug("Transport failed for %s %s: %s", request.method, request.url, e)
            raise TransportError(
                f"{request.method} {request.url}: {e}", original_error=e
            ) from e

        response = Response(raw)
        logger.debug("Response %s for %s %s", response.status_code, request.method, request.url)

        if response.rate_limit is not None:
            with self._rate_lock:
                self._rate_limits[RATE_LIMIT_CATEGORY] = response.rate_limit

        try:
            check_response(response)
        except APIError as e:
            logger.debug("API error: %s", e)
            raise
        return response

    async def do(
        self,
        request: httpx.Request,
        into: Any = None,
        *,
        mode: DecodeMode = DecodeMode.JSON,
        sink: Optional[BinaryIO] = None,
    ) -> Tuple[Any, Response]:
        """Send an API request and decode the response body.

        With ``DecodeMode.JSON`` the body is validated into ``into`` (any
        type pydantic accepts, e.g. ``List[Field]``). An empty body, or no
        ``into`` at all, yields ``None`` rather than an error, as does a JSON
        ``null`` body. With ``DecodeMode.RAW`` the body is written unchanged
        to ``sink`` and the number of bytes written is returned.

        :param request: Request built by ``new_request``
        :type request: httpx.Request
        :param into: Type to decode a JSON body into
        :type into: Any
        :param mode: How to treat the response body
        :type mode: DecodeMode
        :param sink: Writable binary stream for ``DecodeMode.RAW``
        :type sink: Optional[BinaryIO]
        :return: Decoded value and the wrapped response
        :rtype: Tuple[Any, Response]
        :raises ValueError: If ``DecodeMode.RAW`` is used without a sink
        :raises DecodeError: If a non-empty JSON body does not match ``into``
        """
        if mode is DecodeMode.RAW and sink is None:
            raise ValueError("DecodeMode.RAW requires a sink")

        response = await self.bare_do(request)

        if mode is DecodeMode.NONE:
            return None, response

        content = response.content
        if mode is DecodeMode.RAW:
            sink.write(content)
            return len(content), response

        body = content.strip()
        if into is None or not body or body == b"null":
            return None, response

        try:
            value = _type_adapter(into).validate_json(content)
        except PydanticValidationError as e:
            raise DecodeError(
                f"could not decode {request.method} {request.url} response: {e}",
                response=response,
                original_error=e,
            ) from e
        return value, response
