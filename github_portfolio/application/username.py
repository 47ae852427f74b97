"""Normalization of user input into a GitHub login."""
from typing import Optional
from urllib.parse import urlparse


def extract_username(text: Optional[str]) -> Optional[str]:
    """Extract a GitHub login from a bare handle or a profile URL.

    Args:
        text: Raw user input, e.g. ``octocat`` or ``https://github.com/octocat/``

    Returns:
        The login, or None when nothing usable was given
    """
    if text is None:
        return None
    text = text.strip()
    if not text:
        return None

    if "github.com" in text:
        if "://" not in text:
            text = f"https://{text}"
        segments = [part for part in urlparse(text).path.split("/") if part]
        return segments[-1] if segments else None

    return text
