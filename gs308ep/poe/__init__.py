"""PoE port control."""

from .port import build_port_config_body, cycle_port, is_valid_port, set_port_state

__all__ = ["build_port_config_body", "cycle_port", "is_valid_port", "set_port_state"]
