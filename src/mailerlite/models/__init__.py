"""MailerLite models package.

This package contains the Pydantic models used throughout the client,
organized into shared scalar types and per-resource models.
"""

from .base_models import (
    ErrorDetail,
    ErrorResponse,
    MailerLiteModel,
    Timestamp,
    WeakInt,
    format_timestamp,
    parse_timestamp,
    parse_weak_int,
)
from .resources import (
    Field,
    FieldType,
    FieldUpdate,
    ListOptions,
    NewField,
    NewSubscriberInGroup,
    StatGetOptions,
    Stats,
    Subscriber,
    SubscriberField,
    SubscriberListOptions,
    SubscriptionType,
)

__all__ = [
    # Base models
    "MailerLiteModel",
    "ErrorDetail",
    "ErrorResponse",
    # Scalars
    "WeakInt",
    "Timestamp",
    "parse_weak_int",
    "parse_timestamp",
    "format_timestamp",
    # Enums
    "SubscriptionType",
    "FieldType",
    # Subscribers
    "Subscriber",
    "SubscriberField",
    "ListOptions",
    "SubscriberListOptions",
    # Groups
    "NewSubscriberInGroup",
    # Fields
    "Field",
    "NewField",
    "FieldUpdate",
    # Stats
    "Stats",
    "StatGetOptions",
]
