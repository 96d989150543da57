"""Resource services for the MailerLite API.

Each service is bound to a shared ``Client`` and exposes one coroutine
per supported API operation.
"""

from .base import Service
from .campaigns import CampaignsService
from .fields import FieldsService
from .groups import GroupsService
from .segments import SegmentsService
from .settings import SettingsService
from .stats import StatsService
from .subscribers import SubscribersService
from .webhooks import WebhooksService

__all__ = [
    "Service",
    "CampaignsService",
    "FieldsService",
    "GroupsService",
    "SegmentsService",
    "SettingsService",
    "StatsService",
    "SubscribersService",
    "WebhooksService",
]
