"""Subscriber operations.

MailerLite API docs: https://developers.mailerlite.com/reference/subscribers
"""

from typing import List, Optional, Tuple
from urllib.parse import quote

from ..models.resources import Subscriber, SubscriberListOptions
from ..utils.http import Response, add_options
from .base import Service


class SubscribersService(Service):
    """Handles the subscriber related methods of the MailerLite API."""

    async def list(
        self, opts: Optional[SubscriberListOptions] = None
    ) -> Tuple[List[Subscriber], Response]:
        """List subscribers.

        :param opts: Optional subscription type filter and pagination
        :type opts: Optional[SubscriberListOptions]
        :return: Matching subscribers and the response
        :rtype: Tuple[List[Subscriber], Response]
        """
        request = self._client.new_request("GET", add_options("subscribers", opts))
        subscribers, response = await self._client.do(request, List[Subscriber])
        return subscribers or [], response

    async def get(self, email: str) -> Tuple[Optional[Subscriber], Response]:
        """Fetch a single subscriber by email address.

        MailerLite API docs: https://developers.mailerlite.com/reference/single-subscriber

        :param email: Subscriber email address
        :type email: str
        :return: The subscriber and the response
        :rtype: Tuple[Optional[Subscriber], Response]
        """
        request = self._client.new_request("GET", f"subscribers/{quote(email, safe='@')}")
        return await self._client.do(request, Subscriber)
