"""Segment operations.

MailerLite API docs: https://developers.mailerlite.com/reference/segments
"""

from .base import Service


class SegmentsService(Service):
    """Handles the segment related methods of the MailerLite API.

    No operations are exposed yet.
    """
