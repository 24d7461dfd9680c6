"""
gs308ep.extract
===============
Sub-package for pulling values out of the switch's HTML.

Public API
----------
    from gs308ep.extract import extract_quoted_attribute, get_port_stats
"""

from .fields import (
    BACKWARD,
    FORWARD,
    extract_bounded_span,
    extract_cookie_value,
    extract_quoted_attribute,
)
from .telemetry import (
    PortStats,
    get_all_stats,
    get_port_enabled,
    get_port_power,
    get_port_stats,
    get_total_power,
    total_power,
)

__all__ = [
    "BACKWARD",
    "FORWARD",
    "extract_bounded_span",
    "extract_cookie_value",
    "extract_quoted_attribute",
    "PortStats",
    "get_all_stats",
    "get_port_enabled",
    "get_port_power",
    "get_port_stats",
    "get_total_power",
    "total_power",
]
