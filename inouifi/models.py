"""Trip and stop models, time parsing, and the clock used for time-based checks."""

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo

from .config import PAST_GRACE


def _now() -> datetime:
    """Current UTC time. Extracted for test patching."""
    return datetime.now(timezone.utc)


def parse_time(time_val: str) -> datetime:
    """
    Parse an ISO 8601 time string from the API into an aware UTC datetime.

    Raises ValueError for anything that is not a timestamp. Naive values are
    taken to be UTC, which is what the portal sends.
    """
    if not isinstance(time_val, str):
        raise ValueError(f"Expected an ISO 8601 string, got {time_val!r}")

    dt = datetime.fromisoformat(time_val.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_time(dt: datetime, tz: tzinfo) -> str:
    """Format a datetime as HH:MM in the display zone."""
    return dt.astimezone(tz).strftime("%H:%M")


KMH_PER_MPS = 3.6


def mps_to_kmh(speed: float) -> int:
    """Convert the API's m/s reading to whole km/h, truncating toward zero."""
    return int(speed * KMH_PER_MPS)


def _typed(data: dict, key: str, kind: type):
    """Read a payload field, refusing values of the wrong JSON type."""
    value = data[key]
    if not isinstance(value, kind):
        raise TypeError(f"'{key}' should be {kind.__name__}, got {value!r}")
    return value


@dataclass(frozen=True)
class Stop:
    """One scheduled stop of the current trip."""
    label: str
    theoric_date: datetime
    real_date: datetime
    is_delayed: bool = False
    is_created: bool = False
    is_diversion: bool = False
    is_removed: bool = False

    @classmethod
    def from_api(cls, data: dict) -> "Stop":
        """Build a Stop from the camelCase shape of the details endpoint."""
        return cls(
            label=_typed(data, "label", str),
            theoric_date=parse_time(data["theoricDate"]),
            real_date=parse_time(data["realDate"]),
            is_delayed=_typed(data, "isDelayed", bool),
            is_created=_typed(data, "isCreated", bool),
            is_diversion=_typed(data, "isDiversion", bool),
            is_removed=_typed(data, "isRemoved", bool),
        )


@dataclass(frozen=True)
class Trip:
    """The whole itinerary, stops in travel order."""
    stops: tuple[Stop, ...] = ()

    @classmethod
    def from_api(cls, data: dict) -> "Trip":
        stops = data["stops"]
        if not isinstance(stops, list):
            raise ValueError("'stops' is not a list")
        return cls(stops=tuple(Stop.from_api(s) for s in stops))


def in_the_past(stop: Stop, now: datetime | None = None) -> bool:
    """True once more than five minutes have passed since the stop's real time."""
    if now is None:
        now = _now()
    return now > stop.real_date + PAST_GRACE
