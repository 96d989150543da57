"""Webhook operations.

MailerLite API docs: https://developers.mailerlite.com/reference/get-webhooks-list
"""

from .base import Service


class WebhooksService(Service):
    """Handles the webhook related methods of the MailerLite API.

    No operations are exposed yet.
    """
