"""
gs308ep.extract.telemetry
=========================
Per-port PoE statistics read from one ``/getPoePortStatus.cgi`` snapshot.

Each port block in the status page carries a hidden ``value="<port>"`` input
(the *anchor*).  Status and class labels sit just before it, the numeric
readings (``ml570``…``ml581``) just after it.  These functions are pure: they
never fetch anything themselves.
"""

from dataclasses import dataclass

from ..config import (
    BACKWARD_WINDOW,
    CLASS_LABEL,
    CLASS_TOKEN,
    CURRENT_LABEL,
    DELIVERING_POWER,
    FAULT_LABEL,
    FORWARD_WINDOW,
    MAX_PORTS,
    PORT_POWER_FLAG,
    POWER_LABEL,
    STATUS_LABEL,
    STATUS_WINDOW,
    TEMP_LABEL,
    UNKNOWN,
    VOLTAGE_LABEL,
)
from ..logging_setup import log
from .fields import BACKWARD, FORWARD, _quoted_value_from, extract_bounded_span


@dataclass(frozen=True)
class PortStats:
    """Snapshot of one PoE port."""

    port: int
    enabled: bool = False
    status: str = UNKNOWN
    voltage: float = 0.0       # V
    current: float = 0.0       # mA
    power: float = 0.0         # W
    temperature: float = 0.0   # °C
    fault: str = UNKNOWN
    power_class: str = UNKNOWN

    def as_dict(self) -> dict:
        return {
            "port": self.port,
            "enabled": self.enabled,
            "status": self.status,
            "class": self.power_class,
            "voltage": self.voltage,
            "current": self.current,
            "power": self.power,
            "temperature": self.temperature,
            "fault": self.fault,
        }


def find_port_anchor(html: str, port: int) -> int | None:
    pos = html.find(f'value="{port}"')
    return None if pos == -1 else pos


def _to_float(text: str | None) -> float | None:
    if text is None:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def decode_power_class(raw: str) -> str:
    """``ml003@4@`` → ``Class 4``; anything else is returned verbatim."""
    if raw.startswith(CLASS_TOKEN):
        at = raw.find("@", len(CLASS_TOKEN))
        if at > len(CLASS_TOKEN):
            return "Class " + raw[len(CLASS_TOKEN):at]
    return raw


def get_port_power(html: str, port: int, window: int = FORWARD_WINDOW) -> float | None:
    """Return the power reading (W) of *port*, or None if it cannot be read."""
    anchor = find_port_anchor(html, port)
    if anchor is None:
        return None
    return _to_float(extract_bounded_span(html, anchor, POWER_LABEL, FORWARD, window))


def get_port_stats(
    html: str,
    port: int,
    backward_window: int = BACKWARD_WINDOW,
    forward_window: int = FORWARD_WINDOW,
) -> PortStats | None:
    """
    Assemble a PortStats for *port*.

    Only a missing anchor fails the whole record.  Every other field that
    cannot be found or parsed keeps its default.
    """
    anchor = find_port_anchor(html, port)
    if anchor is None:
        log.debug("Port %d: no anchor in status page", port)
        return None

    fields = {}

    status = extract_bounded_span(html, anchor, STATUS_LABEL, BACKWARD, backward_window)
    if status is not None:
        fields["status"] = status
        fields["enabled"] = status == DELIVERING_POWER

    raw_class = extract_bounded_span(
        html, anchor, CLASS_LABEL, BACKWARD, backward_window, opener=">"
    )
    if raw_class is not None:
        fields["power_class"] = decode_power_class(raw_class)

    for name, label in (
        ("voltage", VOLTAGE_LABEL),
        ("current", CURRENT_LABEL),
        ("temperature", TEMP_LABEL),
    ):
        value = _to_float(extract_bounded_span(html, anchor, label, FORWARD, forward_window))
        if value is not None:
            fields[name] = value

    power = get_port_power(html, port, forward_window)
    if power is not None:
        fields["power"] = power

    fault = extract_bounded_span(html, anchor, FAULT_LABEL, FORWARD, forward_window)
    if fault is not None:
        fields["fault"] = fault

    return PortStats(port=port, **fields)


def get_all_stats(html: str) -> list[PortStats]:
    """Stats for every port present in *html*; absent ports are omitted."""
    stats = []
    for port in range(1, MAX_PORTS + 1):
        port_stats = get_port_stats(html, port)
        if port_stats is not None:
            stats.append(port_stats)
    return stats


def total_power(stats: list[PortStats]) -> float:
    return sum(s.power for s in stats)


def get_total_power(html: str) -> float:
    """Sum of every readable per-port power value in *html*."""
    total = 0.0
    for port in range(1, MAX_PORTS + 1):
        power = get_port_power(html, port)
        if power is not None and power >= 0:
            total += power
    return total


def get_port_enabled(html: str, port: int, window: int = STATUS_WINDOW) -> bool:
    """
    Read the hidden ``hidPortPwr`` flag that follows *port*'s anchor.

    ``1`` means PoE is administratively on.  Any missing piece reads as off.
    """
    anchor = find_port_anchor(html, port)
    if anchor is None:
        return False
    flag_pos = html.find(PORT_POWER_FLAG, anchor)
    if flag_pos == -1 or flag_pos > anchor + window:
        return False
    value = _quoted_value_from(html, flag_pos)
    return bool(value) and value[0] == "1"
