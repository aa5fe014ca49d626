"""
Exceptions raised by the Mailinator client.

TransportError covers everything that goes wrong before a response body is
available; DecodeError covers bodies that are not the JSON shape we expect.
ServerError is the DecodeError raised when Mailinator answers with its
{"error": "..."} object instead of data.
"""

from typing import Optional


class MailinatorError(Exception):
    """Base class for all Mailinator client errors."""


class TransportError(MailinatorError):
    """Network, URL or HTTP status failure."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeError(MailinatorError):
    """Response body is not valid JSON or lacks an expected field."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ServerError(DecodeError):
    """Mailinator returned {"error": ...} in place of the expected payload."""

    def __init__(self, server_message: str):
        super().__init__(f"Mailinator error: {server_message}", field="error")
        self.server_message = server_message
