"""Configuration constants and dataclass for inouifi."""

import os
from dataclasses import dataclass, field
from datetime import timedelta
from zoneinfo import ZoneInfo

# API constants
API_BASE = "https://wifi.sncf/router/api"
GPS_ENDPOINT = "/train/gps"
DETAILS_ENDPOINT = "/train/details"
HTTP_TIMEOUT = 10.0  # seconds

# Substring of the iwconfig output when joined to the on-board network
WIFI_MARKER = "_SNCF_WIFI_INOUI"

# Times are sent in UTC, displayed in the operator's zone
DISPLAY_TIMEZONE = "Europe/Paris"

# A stop is greyed out once its real time is this far behind us
PAST_GRACE = timedelta(minutes=5)

# Exit codes
EXIT_OK = 0
EXIT_NOT_CONNECTED = 1
EXIT_SPEED_FAILED = 3
EXIT_STOPS_FAILED = 4
EXIT_WAYBAR_FAILED = 5


@dataclass
class Config:
    """Runtime configuration built from CLI arguments."""
    timezone: str = field(default_factory=lambda: os.environ.get("INOUIFI_TIMEZONE", DISPLAY_TIMEZONE))
    api_base: str = field(default_factory=lambda: os.environ.get("INOUIFI_API_BASE", API_BASE))
    timeout: float = HTTP_TIMEOUT
    wifi_marker: str = WIFI_MARKER
    verbose: bool = False

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)
