"""
Configuration constants for the Mailinator client.

Values can be overridden through environment variables or a .env file
in the current working directory.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Load environment variables from .env file
# Check for .env in current directory first
env_path = Path.cwd() / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)
else:
    # Fallback to default discovery
    try:
        load_dotenv()
    except AssertionError:
        pass

# ==============================================================================
# Mailinator API Settings
# ==============================================================================

# Base URL of the Mailinator API (inbox and email endpoints hang off it)
MAILINATOR_API_ENDPOINT: str = os.getenv(
    "MAILINATOR_API_ENDPOINT",
    "https://api.mailinator.com/api"
)

# Default API key used when a client is created without one
MAILINATOR_API_KEY: Optional[str] = os.getenv("MAILINATOR_API_KEY")

# Request timeout (in seconds) applied to every API call
REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", 30))

# ==============================================================================
# Tor Network Settings
# ==============================================================================

# Tor SOCKS proxy port (9150 for Tor Browser, 9050 for system Tor)
TOR_PORT: int = int(os.getenv("TOR_PORT", 9150))
