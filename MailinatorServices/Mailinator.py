"""
Mailinator temporary email service integration.

Website: https://www.mailinator.com
API: https://api.mailinator.com/api
Features: API key authentication, typed results, optional Tor routing
"""

from typing import Any, Dict, List, Optional, Union

import requests
from fake_useragent import UserAgent

from .config import MAILINATOR_API_ENDPOINT, MAILINATOR_API_KEY, REQUEST_TIMEOUT
from .utils import format_error, logger, mask, tor_proxies

from .builders import build_email, build_inbox_messages
from .errors import DecodeError, ServerError, TransportError
from .models import Email, InboxMessage


class Mailinator:
    """
    Mailinator API client.

    Holds configuration only. Every call opens its own connection and
    closes it before returning, so one instance can be shared between
    threads.

    Attributes:
        INBOX_PATH: Inbox listing endpoint, relative to the base URL.
        EMAIL_PATH: Full email endpoint, relative to the base URL.
    """

    INBOX_PATH = "/inbox"
    EMAIL_PATH = "/email"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = MAILINATOR_API_ENDPOINT,
        timeout: float = REQUEST_TIMEOUT,
        use_tor: bool = False,
        random_user_agent: bool = False
    ):
        """
        Initialize Mailinator client.

        Args:
            api_key: Mailinator API key. Falls back to MAILINATOR_API_KEY.
            base_url: API base URL.
            timeout: Request timeout in seconds.
            use_tor: Route requests through Tor network.
            random_user_agent: Send a random browser User-Agent header.
        """
        # The key is sent as-is; Mailinator itself rejects bad tokens
        self.api_key = api_key if api_key is not None else (MAILINATOR_API_KEY or "")

        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.proxies: Dict[str, str] = tor_proxies() if use_tor else {}
        self.ua: Optional[UserAgent] = UserAgent() if random_user_agent else None

    def _headers(self) -> Dict[str, str]:
        if self.ua is None:
            return {}
        return {'User-Agent': self.ua.random}

    def _raise_for_status(self, response: requests.Response, url: str, level: int = 0) -> None:
        """
        Turn a non-2xx response into an exception.

        Mailinator reports rate limiting and bad keys as {"error": "..."};
        those become ServerError, anything else TransportError.
        """
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and "error" in body:
            logger(f"✗ Mailinator error {response.status_code}: {body['error']}", level=level)
            raise ServerError(str(body["error"]))

        logger(f"✗ Error {response.status_code}: {response.text[:200]}", level=level)
        raise TransportError(
            f"HTTP {response.status_code} from {url}",
            url=url,
            status_code=response.status_code
        )

    def _request(self, path: str, params: Dict[str, str], level: int = 0) -> Any:
        """
        GET an API endpoint and decode its JSON body.

        Args:
            path: Endpoint path (INBOX_PATH or EMAIL_PATH).
            params: Query parameters besides the token.
            level: Logging indentation level.

        Returns:
            Decoded JSON body.

        Raises:
            TransportError: Connection, DNS, timeout, URL or HTTP status failure.
            DecodeError: Body is not valid JSON.
        """
        url = f"{self.base_url}{path}"
        query = {'token': self.api_key, **params}

        try:
            response = requests.get(
                url,
                params=query,
                headers=self._headers(),
                proxies=self.proxies,
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger(f"✗ Request failed: {format_error(e)}", level=level)
            raise TransportError(f"GET {url} failed: {format_error(e)}", url=url) from e

        try:
            if not response.ok:
                self._raise_for_status(response, url, level=level)

            try:
                return response.json()
            except ValueError as e:
                logger(f"✗ Invalid JSON from {path}: {format_error(e)}", level=level)
                raise DecodeError(f"Invalid JSON from {url}: {format_error(e)}") from e
        finally:
            response.close()

    def get_inbox_messages(self, email_address: str, level: int = 0) -> List[InboxMessage]:
        """
        Retrieve all messages from an inbox.

        Args:
            email_address: Inbox address (or bare inbox name).
            level: Logging indentation level.

        Returns:
            Messages in the order the server listed them.
        """
        data = self._request(self.INBOX_PATH, {'to': email_address}, level=level + 1)

        try:
            messages = build_inbox_messages(data)
        except DecodeError as e:
            logger(f"✗ Unexpected inbox response: {e}", level=level)
            raise

        logger(f"📬 Found {len(messages)} emails", level=level)
        return messages

    def get_email(self, email_data: Union[InboxMessage, str], level: int = 0) -> Email:
        """
        Retrieve full content of a specific email.

        Args:
            email_data: InboxMessage from get_inbox_messages, or message ID string.
            level: Logging indentation level.

        Returns:
            The decoded Email.
        """
        email_id = email_data.id if isinstance(email_data, InboxMessage) else email_data

        data = self._request(self.EMAIL_PATH, {'msgid': email_id}, level=level + 1)

        try:
            email = build_email(data)
        except DecodeError as e:
            logger(f"✗ Unexpected email response: {e}", level=level)
            raise

        logger(f"📧 Retrieved email: {mask(email_id, 4)} ({len(email.parts)} parts)", level=level)
        return email

    def print_inbox(self, email_address: str, level: int = 0) -> None:
        """
        Print formatted inbox contents.

        Args:
            email_address: Inbox address.
            level: Logging indentation level.
        """
        messages = self.get_inbox_messages(email_address, level=level)

        if not messages:
            logger("📭 Inbox is empty", level=level)
            return

        logger(f"📬 Inbox for: {email_address}", level=level)

        for i, message in enumerate(messages, 1):
            logger(f"📩 Email #{i}", level=level + 1)
            logger(f"ID: {message.id}", level=level + 2)
            logger(f"From: {message.from_full}", level=level + 2)
            logger(f"Subject: {message.subject}", level=level + 2)
            logger(f"Seen: {message.been_read}", level=level + 2)
            logger(f"Received: {message.seconds_ago}s ago", level=level + 2)


def get_inbox_messages(api_key: str, email_address: str) -> List[InboxMessage]:
    """Retrieve all messages from an inbox with a one-off client."""
    return Mailinator(api_key=api_key).get_inbox_messages(email_address)


def get_email(api_key: str, email_id: str) -> Email:
    """Retrieve one full email with a one-off client."""
    return Mailinator(api_key=api_key).get_email(email_id)


if __name__ == "__main__":
    api = Mailinator()

    inbox = "test"
    messages = api.get_inbox_messages(inbox)
    if messages:
        email = api.get_email(messages[0])
        for part in email.parts:
            print(part.body)

    api.print_inbox(inbox)
