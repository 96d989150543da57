"""Decode modes for successful response bodies."""

from enum import Enum


class DecodeMode(str, Enum):
    """How ``Client.do`` treats a successful response body."""

    NONE = "none"  # body is ignored
    JSON = "json"  # body is validated into the requested type
    RAW = "raw"  # body bytes are copied verbatim into a sink
