"""Waybar custom module payload."""

import json
from datetime import datetime, tzinfo

from ..models import Trip
from .pango import pango_stop


def build_waybar_payload(
    speed_kmh: int,
    trip: Trip,
    tz: tzinfo,
    now: datetime | None = None,
) -> str:
    """
    Build the single-line JSON Waybar reads from a custom module.

    `text` is the bare speed, `tooltip` holds one markup line per stop
    separated by carriage returns.
    """
    tooltip = "\r".join(pango_stop(stop, tz, now) for stop in trip.stops)
    return json.dumps(
        {"text": str(speed_kmh), "tooltip": tooltip},
        ensure_ascii=False,
    )
