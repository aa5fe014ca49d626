"""
MailinatorServices - Mailinator API client.

Entry points:
- get_inbox_messages(api_key, email_address) -> list of InboxMessage
- get_email(api_key, email_id) -> Email
- Mailinator: reusable client holding key, timeout and proxy settings

Failures raise TransportError (network / HTTP) or DecodeError (unexpected
body, including the server's {"error": ...} reply as ServerError).
"""

from .errors import DecodeError, MailinatorError, ServerError, TransportError
from .Mailinator import Mailinator, get_email, get_inbox_messages
from .models import Email, EmailPart, InboxMessage

__all__ = [
    'Mailinator',
    'get_inbox_messages',
    'get_email',
    'InboxMessage',
    'Email',
    'EmailPart',
    'MailinatorError',
    'TransportError',
    'DecodeError',
    'ServerError',
]
