"""Shared Pydantic models and scalar types for the MailerLite client.

The MailerLite API is not consistent about how it encodes some scalars:
identifiers arrive as numbers or numeric strings, and timestamps arrive
either as Unix epochs (seconds or milliseconds) or as
``"YYYY-MM-DD HH:MM:SS"`` strings. The annotated types in this module
absorb those differences so resource models can declare plain ``int``
and ``datetime`` fields.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, Dict

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Seconds values that land beyond this year are read as milliseconds.
MAX_SECONDS_YEAR = 3000

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_INT_STRING = re.compile(r"^[+-]?\d+$")


def parse_weak_int(value: Any) -> int:
    """Decode an integer sent either as a JSON number or a numeric string.

    :param value: Raw decoded JSON value
    :type value: Any
    :return: The integer value
    :rtype: int
    :raises ValueError: If the value is neither an integer nor a numeric string
    """
    if isinstance(value, bool):
        raise ValueError("boolean is not a valid integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_STRING.match(value):
        return int(value)
    raise ValueError(f"cannot decode integer from {value!r}")


def _from_unix(value: int) -> datetime:
    try:
        moment = _EPOCH + timedelta(seconds=value)
    except OverflowError:
        moment = None
    if moment is None or moment.year > MAX_SECONDS_YEAR:
        try:
            moment = _EPOCH + timedelta(milliseconds=value)
        except OverflowError as e:
            raise ValueError(f"timestamp {value} is out of range") from e
    return moment


def parse_timestamp(value: Any) -> datetime:
    """Decode a MailerLite timestamp into an aware UTC datetime.

    Integers are Unix seconds unless that would put the result past
    year 3000, in which case they are read as milliseconds. Strings must
    use the ``"YYYY-MM-DD HH:MM:SS"`` format and are taken as UTC.

    :param value: Raw decoded JSON value or a datetime
    :type value: Any
    :return: Timezone-aware datetime in UTC
    :rtype: datetime
    :raises ValueError: If the value cannot be decoded
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, bool):
        raise ValueError("boolean is not a valid timestamp")
    if isinstance(value, int):
        return _from_unix(value)
    if isinstance(value, str):
        return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
    raise ValueError(f"cannot decode timestamp from {value!r}")


def format_timestamp(value: datetime) -> str:
    """Encode a datetime in the format MailerLite sends."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(TIMESTAMP_FORMAT)


WeakInt = Annotated[int, BeforeValidator(parse_weak_int)]
"""Integer that decodes from either a JSON number or a numeric string."""

Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]
"""Datetime that decodes from a Unix epoch or a ``YYYY-MM-DD HH:MM:SS`` string."""


class MailerLiteModel(BaseModel):
    """Base model for every MailerLite resource and payload.

    Unknown keys sent by the API are ignored so new server-side fields
    do not break decoding.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        """Dump the model as a JSON-ready dict leaving out unset members.

        :return: Dictionary suitable for a request body or query string
        :rtype: Dict[str, Any]
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def _lenient_code(value: Any) -> int:
    # Members of an error body decode independently; a bad one reads as unset.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return 0


def _lenient_message(value: Any) -> str:
    return value if isinstance(value, str) else ""


class ErrorDetail(MailerLiteModel):
    """Details about what went wrong during a failed API request.

    Each member is decoded on its own: a missing, ``null`` or mistyped
    member falls back to its zero value without discarding the other.

    :param code: MailerLite error code (0 when the API sent none)
    :type code: int
    :param message: Human-readable error message
    :type message: str
    """

    code: Annotated[int, BeforeValidator(_lenient_code)] = Field(
        0, description="Error code (optional)"
    )
    message: Annotated[str, BeforeValidator(_lenient_message)] = Field(
        "", description="Human-readable error message"
    )

    def __str__(self) -> str:
        if self.code:
            return f"{self.message} (code: {self.code})"
        return self.message


def _error_object(value: Any) -> Any:
    return value if isinstance(value, (dict, ErrorDetail)) else {}


class ErrorResponse(MailerLiteModel):
    """Body of a non-2xx MailerLite response."""

    error: Annotated[ErrorDetail, BeforeValidator(_error_object)] = Field(
        default_factory=ErrorDetail
    )
