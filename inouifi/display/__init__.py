"""Display rendering components for inouifi."""

from .status import Tone, StopStatus, stop_status
from .terminal import display_stop
from .pango import pango_stop
from .waybar import build_waybar_payload
from .errors import print_error_hint, SPEED_HINT, TRIP_HINT

__all__ = [
    "Tone",
    "StopStatus",
    "stop_status",
    "display_stop",
    "pango_stop",
    "build_waybar_payload",
    "print_error_hint",
    "SPEED_HINT",
    "TRIP_HINT",
]
