"""Status of a stop relative to the original plan, shared by both renderers."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ..models import Stop, in_the_past


class Tone(Enum):
    NEUTRAL = "neutral"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    WARNING = "warning"
    DEFAULT = "default"


@dataclass(frozen=True)
class StopStatus:
    glyph: str
    tone: Tone
    label: str


def stop_status(stop: Stop, now: datetime | None = None) -> StopStatus:
    """
    Pick the glyph for a stop. First match wins:
    past, created, removed, diversion, then a plain middle dot.
    """
    if in_the_past(stop, now):
        glyph, tone = " ", Tone.NEUTRAL
    elif stop.is_created:
        glyph, tone = "+", Tone.POSITIVE
    elif stop.is_removed:
        glyph, tone = "-", Tone.NEGATIVE
    elif stop.is_diversion:
        glyph, tone = "~", Tone.WARNING
    else:
        glyph, tone = "·", Tone.DEFAULT

    return StopStatus(glyph=glyph, tone=tone, label=stop.label)
