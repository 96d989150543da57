"""Construction of the default HTTP transport.

The client accepts any ``httpx.AsyncClient``. When the caller does not
supply one, it builds its own here with pooled connections and
timeouts derived from the settings.
"""

import logging
from typing import Optional

import httpx

from ...config.settings import MailerLiteSettings

logger = logging.getLogger(__name__)

# Only the read timeout is configurable; MailerLite answers small JSON
# bodies, so the other phases stay short.
CONNECT_TIMEOUT = 5.0
WRITE_TIMEOUT = 10.0
POOL_TIMEOUT = 5.0
DEFAULT_READ_TIMEOUT = 30.0

MAX_CONNECTIONS = 20
KEEPALIVE_EXPIRY = 30.0


def create_timeout(read: float = DEFAULT_READ_TIMEOUT) -> httpx.Timeout:
    """Create the timeout used for MailerLite calls.

    :param read: Read timeout in seconds
    :type read: float
    :return: Timeout with the fixed connect, write and pool phases
    :rtype: httpx.Timeout
    """
    return httpx.Timeout(
        connect=CONNECT_TIMEOUT, read=read, write=WRITE_TIMEOUT, pool=POOL_TIMEOUT
    )


def create_limits(max_connections: int = MAX_CONNECTIONS) -> httpx.Limits:
    """Create the connection pool limits, keeping half the pool alive."""
    return httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max_connections // 2,
        keepalive_expiry=KEEPALIVE_EXPIRY,
    )


def build_async_client(
    settings: Optional[MailerLiteSettings] = None,
) -> httpx.AsyncClient:
    """Create the default ``httpx.AsyncClient`` for the MailerLite client.

    Redirects are followed and the read timeout comes from the settings.

    :param settings: Settings providing the read timeout
    :type settings: Optional[MailerLiteSettings]
    :return: New HTTP client owned by the caller
    :rtype: httpx.AsyncClient
    """
    read_timeout = settings.timeout if settings is not None else DEFAULT_READ_TIMEOUT
    client = httpx.AsyncClient(
        timeout=create_timeout(read_timeout),
        limits=create_limits(),
        follow_redirects=True,
    )
    logger.debug("Created default HTTP transport (read timeout %.1fs)", read_timeout)
    return client
