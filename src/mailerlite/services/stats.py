"""Account statistics.

MailerLite API docs: https://developers.mailerlite.com/reference/stats
"""

from typing import Optional, Tuple

from ..models.resources import StatGetOptions, Stats
from ..utils.http import Response, add_options
from .base import Service


class StatsService(Service):
    """Handles the stat related methods of the MailerLite API."""

    async def get(
        self, opts: Optional[StatGetOptions] = None
    ) -> Tuple[Optional[Stats], Response]:
        """Get basic stats of the account, such as subscribers and open/click rates.

        :param opts: Optional point in time to read the stats at
        :type opts: Optional[StatGetOptions]
        :return: Account stats and the response
        :rtype: Tuple[Optional[Stats], Response]
        """
        request = self._client.new_request("GET", add_options("stats", opts))
        return await self._client.do(request, Stats)
