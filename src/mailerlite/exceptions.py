"""Structured exception classes for the MailerLite client.

Every error the client raises derives from ``MailerLiteError``. Each
subclass carries a stable ``code`` and a ``details`` dict so callers can
log failures as structured data and pick their own retry policy by type.
"""

import json
from typing import TYPE_CHECKING, Any, Dict, Optional

from .models.base_models import ErrorDetail

if TYPE_CHECKING:
    from .utils.http.response import Response


class MailerLiteError(Exception):
    """Base exception for all MailerLite client errors.

    :param message: Human-readable error message
    :param code: Error code overriding the class ``default_code``
    :param details: Additional structured context
    :param original_error: Lower-level exception that caused this one
    """

    default_code = "MAILERLITE_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details or {})
        self.original_error = original_error
        if original_error is not None:
            self.details["original_error"] = str(original_error)
            self.details["error_type"] = type(original_error).__name__

    def to_dict(self) -> Dict[str, Any]:
        """Describe the error as a JSON-ready dict.

        :return: ``{"error": code, "message": ..., "details": {...}}``
        """
        return {"error": self.code, "message": self.message, "details": self.details}

    def to_json(self) -> str:
        """Encode ``to_dict()`` as a JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


class ConfigurationError(MailerLiteError):
    """Raised when the client is constructed with invalid settings.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    default_code = "CONFIGURATION_ERROR"

    def __init__(self, message: str, setting: Optional[str] = None):
        super().__init__(message, details={"setting": setting} if setting else None)
        self.setting = setting


class RequestBuildError(MailerLiteError):
    """Raised when a request cannot be built.

    Covers malformed relative URLs and request bodies that cannot be
    JSON encoded. Nothing has been sent when this is raised.
    """

    default_code = "REQUEST_BUILD_ERROR"

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message, original_error=original_error)


class TransportError(MailerLiteError):
    """Raised when the HTTP transport fails.

    Network, DNS and TLS failures end up here. The underlying
    ``httpx`` exception is kept in ``original_error``.
    """

    default_code = "TRANSPORT_ERROR"

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message, original_error=original_error)


class APIError(MailerLiteError):
    """Raised for any response with a status outside 200-299.

    Carries the wrapped response and the best-effort decoded error
    payload. Members the payload lacks hold a zero code and an empty
    message.

    :param response: The response that caused this error
    :param error: Decoded ``{"code", "message"}`` payload
    """

    default_code = "API_ERROR"

    def __init__(self, response: "Response", error: Optional[ErrorDetail] = None):
        self.response = response
        self.error = error or ErrorDetail()
        request = response.request
        self.method = request.method
        self.url = str(request.url)
        self.status_code = response.status_code
        super().__init__(
            f"{self.method} {self.url}: {self.status_code} "
            f"{self.error.message} {self.error.code}",
            details={
                "status_code": self.status_code,
                "method": self.method,
                "url": self.url,
                "api_code": self.error.code,
                "api_message": self.error.message,
            },
        )

    @property
    def api_code(self) -> int:
        """Get the MailerLite error code (0 when absent)."""
        return self.error.code

    @property
    def api_message(self) -> str:
        """Get the MailerLite error message (empty when absent)."""
        return self.error.message


class DecodeError(MailerLiteError):
    """Raised when a successful response body cannot be decoded.

    Empty and ``null`` bodies never raise this error.

    :param message: Description of the decode failure
    :param response: Optional response whose body failed to decode
    :param original_error: Optional exception raised by the decoder
    """

    default_code = "DECODE_ERROR"

    def __init__(
        self,
        message: str,
        response: Optional["Response"] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {"status_code": response.status_code} if response is not None else None
        super().__init__(message, details=details, original_error=original_error)
        self.response = response
