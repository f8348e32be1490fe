"""Terminal rendering of stops as rich Text."""

from datetime import datetime, tzinfo

from rich.text import Text

from ..models import Stop, format_time
from .status import Tone, stop_status

# No entry for DEFAULT: the plain dot keeps the terminal's own color
TONE_STYLES = {
    Tone.NEUTRAL: "bright_black",
    Tone.POSITIVE: "green",
    Tone.NEGATIVE: "red",
    Tone.WARNING: "yellow",
}


def theoric_label(stop: Stop, tz: tzinfo) -> Text:
    """Scheduled time, struck through in red when the stop is delayed."""
    style = "red strike" if stop.is_delayed else "green"
    return Text(format_time(stop.theoric_date, tz), style=style)


def real_label(stop: Stop, tz: tzinfo) -> Text:
    """Actual time, only shown when it differs from the schedule."""
    if not stop.is_delayed:
        return Text("")
    return Text(format_time(stop.real_date, tz), style="green")


def status_label(stop: Stop, now: datetime | None = None) -> Text:
    status = stop_status(stop, now)
    style = TONE_STYLES.get(status.tone, "")

    text = Text()
    text.append(status.glyph, style=f"bold {style}".strip())
    text.append(f" {status.label}")
    return text


def display_stop(stop: Stop, tz: tzinfo, now: datetime | None = None) -> Text:
    """One line of the `stops` listing."""
    return Text(" ").join([
        theoric_label(stop, tz),
        real_label(stop, tz),
        status_label(stop, now),
    ])
