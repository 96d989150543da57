"""Group operations.

MailerLite API docs: https://developers.mailerlite.com/reference/groups
"""

from typing import Optional, Tuple

from ..models.resources import NewSubscriberInGroup, Subscriber
from ..utils.http import Response
from .base import Service


class GroupsService(Service):
    """Handles the group related methods of the MailerLite API."""

    async def add_subscriber(
        self, id: int, new_subscriber: NewSubscriberInGroup
    ) -> Tuple[Optional[Subscriber], Response]:
        """Add a subscriber to a group.

        MailerLite API docs: https://developers.mailerlite.com/reference/add-single-subscriber

        :param id: Group identifier
        :type id: int
        :param new_subscriber: Subscriber to add; unset members are not sent
        :type new_subscriber: NewSubscriberInGroup
        :return: The subscriber as stored in the group and the response
        :rtype: Tuple[Optional[Subscriber], Response]
        """
        request = self._client.new_request(
            "POST", f"groups/{int(id)}/subscribers", new_subscriber
        )
        return await self._client.do(request, Subscriber)
