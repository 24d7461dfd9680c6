"""
HTTP client configuration for switch communication.

Provides plain-HTTP session setup.  The switch serves one administrative
session at a time, so there is deliberately no retry adapter here.
"""

import requests


def build_session() -> requests.Session:
    """
    Return a requests.Session with browser-like headers.

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()
    # The web console only answers requests that look like they come from
    # its own UI.
    session.headers.update({
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        ),
    })
    return session


def base_url(host: str) -> str:
    """
    Build the base URL for the switch.

    Args:
        host: Switch IP address or hostname

    Returns:
        Base URL string (e.g., 'http://192.168.0.239')
    """
    return f"http://{host}"
