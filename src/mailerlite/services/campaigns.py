"""Campaign operations.

MailerLite API docs: https://developers.mailerlite.com/reference/campaigns
"""

from .base import Service


class CampaignsService(Service):
    """Handles the campaign related methods of the MailerLite API.

    No operations are exposed yet.
    """
