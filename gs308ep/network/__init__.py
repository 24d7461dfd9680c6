"""
Network operations module for HTTP client setup and request handling.
"""

from gs308ep.network.client import base_url, build_session
from gs308ep.network.transport import HttpResponse, Transport

__all__ = ["build_session", "base_url", "HttpResponse", "Transport"]
