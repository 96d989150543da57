"""Pydantic models for MailerLite API resources, payloads and query options.

Resource models mirror the JSON the API returns. Payload and option
models default every member to ``None`` so that only the values the
caller sets are sent, either in the JSON body or in the query string.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field as ModelField

from .base_models import MailerLiteModel, Timestamp, WeakInt


# Enums
class SubscriptionType(str, Enum):
    """Current state of a subscription."""

    UNSUBSCRIBED = "unsubscribed"
    ACTIVE = "active"
    UNCONFIRMED = "unconfirmed"
    BOUNCED = "bounced"
    JUNK = "junk"


class FieldType(str, Enum):
    """Type of data a custom field can store."""

    TEXT = "TEXT"
    NUMBER = "NUMBER"
    DATE = "DATE"


# Subscribers
class SubscriberField(MailerLiteModel):
    """A custom field and its value on a subscriber."""

    key: str = ""
    value: Optional[str] = None
    type: str = ""


class Subscriber(MailerLiteModel):
    """An email subscriber.

    :param id: Subscriber identifier
    :type id: int
    :param email: Subscriber email address
    :type email: str
    :param type: Subscription state
    :type type: SubscriptionType
    :param sent: Number of emails sent to the subscriber
    :type sent: int
    :param opened: Number of emails opened
    :type opened: int
    :param clicked: Number of emails with a clicked link
    :type clicked: int
    :param fields: Custom field values
    :type fields: List[SubscriberField]
    """

    id: int
    name: str = ""
    email: str = ""
    sent: int = 0
    opened: int = 0
    clicked: int = 0
    type: SubscriptionType = SubscriptionType.ACTIVE
    country_id: str = ""
    signup_ip: Optional[str] = None
    signup_timestamp: Optional[str] = None
    confirmation_ip: Optional[str] = None
    confirmation_timestamp: Optional[str] = None
    fields: List[SubscriberField] = ModelField(default_factory=list)
    date_subscribe: Optional[Timestamp] = None
    date_unsubscribe: Optional[Timestamp] = None
    date_created: Optional[Timestamp] = None
    date_updated: Optional[Timestamp] = None


class ListOptions(MailerLiteModel):
    """Pagination parameters shared by list endpoints."""

    offset: Optional[int] = None
    limit: Optional[int] = None


class SubscriberListOptions(ListOptions):
    """Optional parameters for ``SubscribersService.list``."""

    type: Optional[SubscriptionType] = None


# Groups
class NewSubscriberInGroup(MailerLiteModel):
    """A subscriber to add to a group.

    :param email: Subscriber email address
    :type email: Optional[str]
    :param name: Subscriber name
    :type name: Optional[str]
    :param fields: Custom field values keyed by field key
    :type fields: Optional[Dict[str, str]]
    :param resubscribe: Reactivate the subscriber if they unsubscribed
    :type resubscribe: Optional[bool]
    :param autoresponders: Trigger autoresponders for the group
    :type autoresponders: Optional[bool]
    :param type: Initial subscription state
    :type type: Optional[SubscriptionType]
    """

    email: Optional[str] = None
    name: Optional[str] = None
    fields: Optional[Dict[str, str]] = None
    resubscribe: Optional[bool] = None
    autoresponders: Optional[bool] = None
    type: Optional[SubscriptionType] = None


# Fields
class Field(MailerLiteModel):
    """A custom field in a subscriber profile."""

    id: WeakInt
    title: str = ""
    key: str = ""
    type: FieldType = FieldType.TEXT
    date_updated: Optional[Timestamp] = None
    date_created: Optional[Timestamp] = None


class NewField(MailerLiteModel):
    """A field to be created."""

    title: Optional[str] = None
    type: Optional[FieldType] = None


class FieldUpdate(MailerLiteModel):
    """Information to change on an existing field."""

    title: Optional[str] = None


# Stats
class Stats(MailerLiteModel):
    """Account-wide statistics."""

    subscribed: int = 0
    unsubscribed: int = 0
    campaigns: int = 0
    sent_emails: int = 0
    open_rate: float = 0.0
    click_rate: float = 0.0
    bounce_rate: float = 0.0


class StatGetOptions(MailerLiteModel):
    """Optional parameters for ``StatsService.get``.

    :param timestamp: Unix timestamp to read the stats as they were at
        that point in the past
    :type timestamp: Optional[int]
    """

    timestamp: Optional[int] = None
