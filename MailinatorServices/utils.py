"""
Utility functions for the Mailinator client.

Provides indented console logging, error formatting and secret masking.
"""

from typing import Dict

from .config import TOR_PORT


def logger(message: str, level: int = 0) -> None:
    """
    Print a message with indentation based on level.

    Args:
        message: The message to print.
        level: Indentation level (each level adds 2 spaces).
    """
    indent = "  " * level
    print(f"{indent}{message}")


def format_error(e: Exception) -> str:
    """
    Format an exception message for a single log line.

    requests wraps urllib3 errors in long reprs spread over several lines;
    only the first line is kept.

    Args:
        e: The exception to format.

    Returns:
        A cleaned error message string.
    """
    text = str(e).strip()
    return text.splitlines()[0] if text else e.__class__.__name__


def mask(value: str, show_chars: int = 3) -> str:
    """Mask sensitive data, showing only first few characters."""
    if not value:
        return "***"
    if len(value) <= show_chars:
        return "*" * len(value)
    return value[:show_chars] + "*" * (len(value) - show_chars)


def tor_proxies() -> Dict[str, str]:
    """Proxy mapping that routes requests through the local Tor SOCKS port."""
    return {
        'http': f'socks5://127.0.0.1:{TOR_PORT}',
        'https': f'socks5://127.0.0.1:{TOR_PORT}'
    }
