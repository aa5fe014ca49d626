"""
Builders turning decoded Mailinator JSON into InboxMessage / Email objects.

Every field is read by its wire name and converted explicitly; a missing key
or a value of the wrong shape raises DecodeError naming the wire key. Nothing
is defaulted except an absent ``parts`` array, which means "no parts".
"""

import json
import re
from typing import Any, Dict, List, Optional

from .errors import DecodeError, ServerError
from .models import Email, EmailPart, InboxMessage

_INTEGER_RE = re.compile(r"[+-]?\d+")


def check_server_error(payload: Any, expected_key: str) -> Dict[str, Any]:
    """
    Validate the top level of a response.

    Args:
        payload: Decoded JSON body.
        expected_key: Key the endpoint puts its data under.

    Returns:
        The payload, known to be a dict holding expected_key.

    Raises:
        ServerError: expected_key is missing and the server sent "error".
        DecodeError: payload is not an object or lacks expected_key.
    """
    if not isinstance(payload, dict):
        raise DecodeError(
            f"Expected a JSON object, got {type(payload).__name__}",
            field=expected_key
        )
    if expected_key not in payload:
        if "error" in payload:
            raise ServerError(str(payload["error"]))
        raise DecodeError(f"Missing '{expected_key}' in response", field=expected_key)
    return payload


def _expect_object(value: Any, name: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(
            f"'{name}' must be a JSON object, got {type(value).__name__}",
            field=name
        )
    return value


def _get(obj: Dict[str, Any], key: str) -> Any:
    if key not in obj:
        raise DecodeError(f"Missing field '{key}'", field=key)
    return obj[key]


def _to_text(value: Any, key: str) -> str:
    """Render a JSON value as text, the way the JSON document spells it."""
    if value is None:
        raise DecodeError(f"Field '{key}' is null", field=key)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        try:
            return str(value)
        except ValueError as e:
            # ints past sys.get_int_max_str_digits() refuse to render
            raise DecodeError(f"Field '{key}' cannot be rendered as text: {e}", field=key) from e
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _to_int(value: Any, key: str, minimum: Optional[int] = None) -> int:
    # Numbers arrive either as JSON numbers or as numeric strings
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise DecodeError(f"Field '{key}' is not an integer: {value!r}", field=key)

    if isinstance(value, str):
        text = value.strip()
        if not _INTEGER_RE.fullmatch(text):
            raise DecodeError(f"Field '{key}' is not an integer: {value!r}", field=key)
        try:
            value = int(text)
        except ValueError as e:
            raise DecodeError(f"Field '{key}' is not a usable integer: {e}", field=key) from e

    if minimum is not None and value < minimum:
        raise DecodeError(f"Field '{key}' must be >= {minimum}", field=key)
    return value


def _read_text(obj: Dict[str, Any], key: str) -> str:
    return _to_text(_get(obj, key), key)


def _read_int(obj: Dict[str, Any], key: str, minimum: Optional[int] = None) -> int:
    return _to_int(_get(obj, key), key, minimum=minimum)


def _read_bool(obj: Dict[str, Any], key: str) -> bool:
    value = _get(obj, key)
    if not isinstance(value, bool):
        raise DecodeError(f"Field '{key}' is not a boolean: {value!r}", field=key)
    return value


def to_header_map(headers: Any) -> Dict[str, str]:
    """
    Convert a JSON headers object to a name -> value mapping.

    Names and values are stripped; when two names collide after stripping
    the later one wins.
    """
    _expect_object(headers, "headers")

    result: Dict[str, str] = {}
    for name, value in headers.items():
        result[str(name).strip()] = _to_text(value, str(name)).strip()
    return result


def build_inbox_message(obj: Any) -> InboxMessage:
    """Build an InboxMessage from one element of the inbox "messages" array."""
    obj = _expect_object(obj, "message")

    return InboxMessage(
        to=_read_text(obj, "to"),
        id=_read_text(obj, "id"),
        seconds_ago=_read_int(obj, "seconds_ago", minimum=0),
        time=_read_int(obj, "time"),
        subject=_read_text(obj, "subject"),
        from_full=_read_text(obj, "fromfull"),
        from_name=_read_text(obj, "from"),
        been_read=_read_bool(obj, "been_read"),
        ip=_read_text(obj, "ip"),
    )


def build_inbox_messages(payload: Any) -> List[InboxMessage]:
    """Build every message of an inbox response, keeping server order."""
    payload = check_server_error(payload, "messages")

    messages = payload["messages"]
    if not isinstance(messages, list):
        raise DecodeError("'messages' must be a JSON array", field="messages")

    result: List[InboxMessage] = []
    for index, item in enumerate(messages):
        try:
            result.append(build_inbox_message(item))
        except DecodeError as e:
            raise DecodeError(f"messages[{index}]: {e}", field=e.field) from e
    return result


def _build_part(obj: Any) -> EmailPart:
    obj = _expect_object(obj, "part")
    return EmailPart(
        headers=to_header_map(_get(obj, "headers")),
        body=_read_text(obj, "body"),
    )


def build_email(payload: Any) -> Email:
    """
    Build an Email from the response of the email endpoint.

    Args:
        payload: Decoded JSON body.

    Returns:
        A fully populated Email.

    Raises:
        ServerError: The server replied with {"error": ...}.
        DecodeError: Any required field is missing or malformed.
    """
    payload = check_server_error(payload, "data")
    data = _expect_object(payload["data"], "data")

    raw_parts = data.get("parts")
    if raw_parts is None:
        raw_parts = []
    elif not isinstance(raw_parts, list):
        raise DecodeError("'parts' must be a JSON array", field="parts")

    parts: List[EmailPart] = []
    for index, item in enumerate(raw_parts):
        try:
            parts.append(_build_part(item))
        except DecodeError as e:
            raise DecodeError(f"parts[{index}]: {e}", field=e.field) from e

    return Email(
        api_inbox_fetches_left=_read_int(payload, "apiInboxFetchesLeft", minimum=0),
        api_email_fetches_left=_read_int(payload, "apiEmailFetchesLeft", minimum=0),
        forwards_left=_read_int(payload, "forwardsLeft", minimum=0),
        id=_read_text(data, "id"),
        seconds_ago=_read_int(data, "seconds_ago", minimum=0),
        to=_read_text(data, "to"),
        time=_read_int(data, "time"),
        subject=_read_text(data, "subject"),
        from_full=_read_text(data, "fromfull"),
        headers=to_header_map(_get(data, "headers")),
        parts=parts,
    )
