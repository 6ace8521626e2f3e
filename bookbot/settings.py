"""
Global settings and configuration for the Bookbot application.
"""

import os

# Secrets
DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")

# Google Books Configuration
GOOGLE_BOOKS_API_URL = os.getenv(
    "GOOGLE_BOOKS_API_URL", "https://www.googleapis.com/books/v1/volumes"
)
HTTP_TIMEOUT = float(os.getenv("BOOKBOT_HTTP_TIMEOUT", "10"))  # seconds
RECOMMEND_MAX_RESULTS = 10

# Logging
LOG_LEVEL = os.getenv("BOOKBOT_LOG_LEVEL", "INFO").upper()

# Message formatting
COMMAND_PREFIX = "!"
EMBED_COLOR = 0x0099FF
FOOTER_TEXT = "Powered by Google Books API"


def require(name: str) -> str:
    """
    Return the value of a required setting.

    Args:
        name: Name of the module-level setting (same as its environment variable)

    Returns:
        The configured value

    Raises:
        RuntimeError: If the setting is unset or empty
    """
    value = globals().get(name)
    if not value:
        raise RuntimeError(f"Environment variable '{name}' is required but not set")
    return value
