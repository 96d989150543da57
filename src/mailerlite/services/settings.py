"""Account settings operations.

MailerLite API docs: https://developers.mailerlite.com/reference/settings
"""

from .base import Service


class SettingsService(Service):
    """Handles the account settings related methods of the MailerLite API.

    No operations are exposed yet.
    """
