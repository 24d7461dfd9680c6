"""
Command-line interface for the GS308EP controller.

Provides argument parsing, action dispatch and text / JSON output.
"""

import argparse
import json
import logging
import sys
import time

try:
    from tqdm import tqdm as _tqdm
    _TQDM_AVAILABLE = True
except ImportError:
    _TQDM_AVAILABLE = False

from gs308ep import __version__
from gs308ep.config import (
    DEFAULT_CYCLE_DELAY_MS,
    DEFAULT_HOST,
    DEFAULT_PASSWORD,
    MAX_POE_BUDGET_W,
)
from gs308ep.extract.telemetry import total_power
from gs308ep.logging_setup import _setup_logging, log
from gs308ep.poe.port import is_valid_port
from gs308ep.switch import GS308EP

PROGRAM_NAME = "gs308ep"

_ACTIONS = ("on", "off", "cycle", "status", "power", "total_power", "stats")
_PORT_ACTIONS = ("on", "off", "cycle", "status", "power")


def _port_number(text: str) -> int:
    try:
        port = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {text!r}")
    if not is_valid_port(port):
        raise argparse.ArgumentTypeError("Port must be between 1 and 8")
    return port


def _delay_ms(text: str) -> int:
    try:
        delay = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid delay: {text!r}")
    if delay < 0:
        raise argparse.ArgumentTypeError("Cycle delay must be non-negative")
    return delay


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Control Netgear GS308EP PoE switch ports and monitor power consumption.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        epilog=(
            "Environment variables:\n"
            "  GS308EP_HOST       Switch IP address (overridden by --host)\n"
            "  GS308EP_PASSWORD   Administrator password (overridden by --password)\n"
            "\n"
            "Examples:\n"
            f"  {PROGRAM_NAME} -h 192.168.1.1 -p admin -P 3 -o\n"
            f"  {PROGRAM_NAME} -h 192.168.1.1 -p admin -P 5 -c 3000\n"
            f"  {PROGRAM_NAME} -h 192.168.1.1 -p admin -S --json\n"
        ),
    )
    parser.add_argument(
        "-h", "--host", default=DEFAULT_HOST,
        help="Switch IP address or hostname",
    )
    parser.add_argument(
        "-p", "--password", default=DEFAULT_PASSWORD,
        help="Administrator password",
    )
    parser.add_argument(
        "-P", "--port", type=_port_number,
        help="Port number (1-8)",
    )

    actions = parser.add_argument_group("actions")
    actions.add_argument("-o", "--on", dest="on", action="store_true", help="Turn port ON")
    actions.add_argument("-f", "--off", dest="off", action="store_true", help="Turn port OFF")
    actions.add_argument(
        "-c", "--cycle", nargs="?", type=_delay_ms, const=DEFAULT_CYCLE_DELAY_MS,
        metavar="DELAY",
        help=f"Power cycle port (optional delay in ms, default {DEFAULT_CYCLE_DELAY_MS})",
    )
    actions.add_argument("-s", "--status", action="store_true", help="Show port status")
    actions.add_argument(
        "-w", "--power", action="store_true",
        help="Show power consumption for specified port",
    )
    actions.add_argument(
        "-W", "--total-power", dest="total_power", action="store_true",
        help="Show total power consumption",
    )
    actions.add_argument(
        "-S", "--stats", action="store_true",
        help="Show comprehensive statistics for all ports",
    )

    output = parser.add_argument_group("output format")
    output.add_argument("-j", "--json", action="store_true", help="Output in JSON format")
    output.add_argument("-q", "--quiet", action="store_true", help="Suppress non-essential output")
    output.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")

    parser.add_argument("--help", action="help", help="Display this help and exit")
    parser.add_argument(
        "--version", action="version",
        version=f"{PROGRAM_NAME} version {__version__}",
    )
    return parser


def _selected_actions(args: argparse.Namespace) -> list[str]:
    selected = []
    for action in _ACTIONS:
        value = getattr(args, action)
        if action == "cycle":
            if value is not None:
                selected.append(action)
        elif value:
            selected.append(action)
    return selected


def _emit(payload: dict) -> None:
    print(json.dumps(payload))


def _sleeper(show_progress: bool):
    """Blocking sleep for the cycle delay, with a tqdm countdown when possible."""
    if not (show_progress and _TQDM_AVAILABLE):
        return time.sleep

    def _sleep(seconds: float) -> None:
        steps = max(1, int(seconds * 10))
        for _ in _tqdm(range(steps), desc="Waiting", unit="step", leave=False):
            time.sleep(seconds / steps)

    return _sleep


def _do_switch(switch: GS308EP, args, action: str) -> bool:
    port = args.port
    ok = switch.turn_on_port(port) if action == "on" else switch.turn_off_port(port)
    if args.json:
        _emit({"port": port, "action": action, "success": ok})
    elif ok and not args.quiet:
        print(f"Port {port} turned {action.upper()}")
    return ok


def _do_cycle(switch: GS308EP, args) -> bool:
    port, delay = args.port, args.cycle
    interactive = not (args.json or args.quiet)
    if interactive:
        print(f"Cycling port {port} ({delay} ms off)...")
    ok = switch.cycle_port(port, delay, sleep=_sleeper(interactive))
    if args.json:
        payload = {"port": port, "action": "cycle"}
        if ok:
            payload["delay"] = delay
        payload["success"] = ok
        _emit(payload)
    elif ok and not args.quiet:
        print(f"Port {port} turned ON (cycle complete)")
    return ok


def _do_status(switch: GS308EP, args) -> bool:
    on = switch.get_port_status(args.port)
    if args.json:
        _emit({"port": args.port, "status": "on" if on else "off"})
    elif not args.quiet:
        print(f"Port {args.port}: {'ON' if on else 'OFF'}")
    return True


def _do_power(switch: GS308EP, args) -> bool:
    power = switch.get_port_power(args.port)
    if args.json:
        _emit({"port": args.port, "power": round(power, 1)})
    elif not args.quiet:
        reading = f"{power:.1f} W" if power >= 0 else "N/A"
        print(f"Port {args.port} power: {reading}")
    return power >= 0


def _do_total_power(switch: GS308EP, args) -> bool:
    total = switch.get_total_power()
    if total < 0:
        return False
    if args.json:
        _emit({"total_power": round(total, 1), "max_power": MAX_POE_BUDGET_W})
    elif not args.quiet:
        print(f"Total PoE power: {total:.1f} W / {MAX_POE_BUDGET_W:.1f} W")
    return True


def _do_stats(switch: GS308EP, args) -> bool:
    stats = switch.get_all_port_stats()
    total = total_power(stats)
    if args.json:
        _emit({
            "ports": [s.as_dict() for s in stats],
            "total_power": round(total, 1),
        })
    elif not args.quiet:
        print()
        print("=== PoE Port Statistics ===")
        print()
        for s in stats:
            print(f"Port {s.port}: {s.status}")
            print(f"  Class: {s.power_class}  |  Voltage: {s.voltage:.1f} V"
                  f"  |  Current: {s.current:.0f} mA")
            print(f"  Power: {s.power:.1f} W  |  Temperature: {s.temperature:.0f} °C"
                  f"  |  Fault: {s.fault}")
            print()
        print(f"Total Power Budget Used: {total:.1f} W / {MAX_POE_BUDGET_W:.1f} W")
    return bool(stats)


def run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    if not args.host:
        parser.error("Switch host is required (use --host or GS308EP_HOST)")
    if not args.password:
        parser.error("Switch password is required (use --password or GS308EP_PASSWORD)")

    selected = _selected_actions(args)
    if not selected:
        parser.error("No action specified")
    if len(selected) > 1:
        parser.error("Only one action can be specified at a time")
    action = selected[0]
    if action in _PORT_ACTIONS and args.port is None:
        parser.error("Port number required for this action (use --port)")

    interactive = not (args.json or args.quiet)
    with GS308EP(args.host, args.password) as switch:
        if interactive:
            print(f"Connecting to {args.host}...")
        if not switch.login():
            return 1
        if interactive:
            print("Authenticated successfully")

        if action in ("on", "off"):
            ok = _do_switch(switch, args, action)
        elif action == "cycle":
            ok = _do_cycle(switch, args)
        elif action == "status":
            ok = _do_status(switch, args)
        elif action == "power":
            ok = _do_power(switch, args)
        elif action == "total_power":
            ok = _do_total_power(switch, args)
        else:
            ok = _do_stats(switch, args)
    return 0 if ok else 1


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the gs308ep CLI.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    _setup_logging(debug=args.verbose, quiet=args.quiet)
    if args.verbose:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)
    if args.verbose and not _TQDM_AVAILABLE:
        log.info("Tip: install tqdm for a cycle countdown   (pip install tqdm)")

    return run(args, parser)


if __name__ == "__main__":
    sys.exit(main())
