"""Base class for resource services."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..client import Client


class Service:
    """A stateless set of operations bound to a shared ``Client``.

    Services hold a reference to the client and build their requests
    through its pipeline; they keep no state of their own.

    :param client: Client that sends the requests
    :type client: Client
    """

    def __init__(self, client: "Client"):
        self._client = client
