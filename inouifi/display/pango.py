"""Pango markup rendering of stops, for the Waybar tooltip."""

from datetime import datetime, tzinfo

from ..models import Stop, format_time
from .status import Tone, stop_status

TONE_COLORS = {
    Tone.NEUTRAL: "grey",
    Tone.POSITIVE: "green",
    Tone.NEGATIVE: "red",
    Tone.WARNING: "yellow",
    Tone.DEFAULT: "white",
}


def theoric_label(stop: Stop, tz: tzinfo) -> str:
    local_time = format_time(stop.theoric_date, tz)
    if stop.is_delayed:
        return f'<span foreground="red"><s>{local_time}</s></span>'
    return f'<span foreground="green">{local_time}</span>'


def real_label(stop: Stop, tz: tzinfo) -> str:
    if not stop.is_delayed:
        return ""
    return f'<span foreground="green">{format_time(stop.real_date, tz)}</span>'


def status_label(stop: Stop, now: datetime | None = None) -> str:
    """Bold colored glyph followed by the stop name, with & escaped."""
    status = stop_status(stop, now)
    color = TONE_COLORS[status.tone]
    label = status.label.replace("&", "&amp;")
    return f'<span foreground="{color}"><b>{status.glyph}</b></span> {label}'


def pango_stop(stop: Stop, tz: tzinfo, now: datetime | None = None) -> str:
    """One tooltip line. The real time sits right after the scheduled one."""
    return f"{theoric_label(stop, tz)}{real_label(stop, tz)} {status_label(stop, now)}"
