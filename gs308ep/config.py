"""Configuration constants for the Netgear GS308EP controller."""

import os

# Host and password can also be supplied via GS308EP_HOST / GS308EP_PASSWORD
DEFAULT_HOST = os.environ.get("GS308EP_HOST", "")
DEFAULT_PASSWORD = os.environ.get("GS308EP_PASSWORD", "")

LOGIN_CGI      = "/login.cgi"
POE_CONFIG_CGI = "/PoEPortConfig.cgi"
POE_STATUS_CGI = "/getPoePortStatus.cgi"

SESSION_COOKIE = "SID"

REQUEST_TIMEOUT        = 5      # seconds per HTTP request
MAX_PORTS              = 8
DEFAULT_CYCLE_DELAY_MS = 2000
MAX_POE_BUDGET_W       = 65.0   # total PoE budget of the GS308EP

# Search windows around a port's anchor in the status page.  These match the
# firmware revisions seen so far; callers can override them per lookup.
BACKWARD_WINDOW = 500
FORWARD_WINDOW  = 2000
STATUS_WINDOW   = 1000   # hidPortPwr flag must sit this close after the anchor

# Fixed PoEPortConfig.cgi form fields: 802.3at power mode, IEEE 802 detection
PORT_CONFIG_CONSTANTS = (
    ("PORT_PRIO", "0"),
    ("POW_MOD", "3"),
    ("POW_LIMT_TYP", "0"),
    ("DETEC_TYP", "2"),
    ("DISCONNECT_TYP", "2"),
)

# Status-page labels
STATUS_LABEL     = "poe-power-mode"
CLASS_LABEL      = "powClassShow"
VOLTAGE_LABEL    = "ml570"
CURRENT_LABEL    = "ml572"
POWER_LABEL      = "ml574"
TEMP_LABEL       = "ml575"
FAULT_LABEL      = "ml581"
PORT_POWER_FLAG  = "hidPortPwr"

DELIVERING_POWER = "Delivering Power"
CLASS_TOKEN      = "ml003@"
UNKNOWN          = "Unknown"
