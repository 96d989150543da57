"""MailerLite API v2 client package.

This package provides an asynchronous client for the MailerLite REST
API. Requests are built and sent through one shared pipeline on the
``Client``; resource services such as ``client.subscribers`` and
``client.fields`` map each API operation onto it.

:var __version__: Current package version
:type __version__: str
"""

from .client import Client, DecodeMode, add_options, check_response
from .config import MailerLiteSettings, configure_logging
from .exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    MailerLiteError,
    RequestBuildError,
    TransportError,
)
from .models import (
    ErrorDetail,
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
from .utils.http import RateLimit, Response

__version__ = "0.1.0"

__all__ = [
    "Client",
    "DecodeMode",
    "add_options",
    "check_response",
    "MailerLiteSettings",
    "configure_logging",
    "MailerLiteError",
    "ConfigurationError",
    "RequestBuildError",
    "TransportError",
    "APIError",
    "DecodeError",
    "ErrorDetail",
    "Field",
    "FieldType",
    "FieldUpdate",
    "ListOptions",
    "NewField",
    "NewSubscriberInGroup",
    "StatGetOptions",
    "Stats",
    "Subscriber",
    "SubscriberField",
    "SubscriberListOptions",
    "SubscriptionType",
    "RateLimit",
    "Response",
]
