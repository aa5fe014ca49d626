"""
Typed results returned by the Mailinator client.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class InboxMessage:
    """One row of an inbox listing."""

    to: str
    id: str
    seconds_ago: int
    time: int
    subject: str
    from_full: str
    from_name: str
    been_read: bool
    ip: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class EmailPart:
    """One MIME body part. The body is returned exactly as the server sent it."""

    headers: Dict[str, str]
    body: str


@dataclass(frozen=True)
class Email:
    """
    Full content of one message.

    Attributes:
        api_inbox_fetches_left: Remaining inbox calls for the API key.
        api_email_fetches_left: Remaining email calls for the API key.
        forwards_left: Remaining forwards for the API key.
        headers: Message headers, trimmed, last duplicate wins.
        parts: Body parts in server order.
    """

    api_inbox_fetches_left: int
    api_email_fetches_left: int
    forwards_left: int
    id: str
    seconds_ago: int
    to: str
    time: int
    subject: str
    from_full: str
    headers: Dict[str, str] = field(default_factory=dict)
    parts: List[EmailPart] = field(default_factory=list)

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Case-insensitive header lookup."""
        wanted = name.strip().lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
