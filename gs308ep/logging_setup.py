"""Logging configuration for the GS308EP controller."""

import logging
import sys

try:
    import colorlog
    _COLORLOG_AVAILABLE = True
except ImportError:
    _COLORLOG_AVAILABLE = False

log = logging.getLogger("gs308ep")


def _setup_logging(debug: bool = False, quiet: bool = False) -> None:
    """
    Send package logs to stderr so stdout stays clean for ``--json`` output.

    *debug* enables protocol-level detail, *quiet* keeps only warnings and
    errors.
    """
    if debug:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    log.setLevel(level)
    log.handlers.clear()
    log.propagate = False

    fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s" if debug \
        else "%(asctime)s [%(levelname)s] %(message)s"

    if _COLORLOG_AVAILABLE:
        handler = colorlog.StreamHandler(sys.stderr)
        handler.setFormatter(colorlog.ColoredFormatter(
            "%(log_color)s" + fmt.replace("%(message)s", "%(reset)s%(message)s"),
            datefmt="%H:%M:%S",
            log_colors={
                "DEBUG":    "cyan",
                "INFO":     "green",
                "WARNING":  "yellow",
                "ERROR":    "red",
                "CRITICAL": "bold_red",
            },
        ))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))
    log.addHandler(handler)
