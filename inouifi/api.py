"""API communication with the on-board wifi portal."""

import logging
import math
from typing import Any

import httpx

from .config import DETAILS_ENDPOINT, GPS_ENDPOINT, Config
from .models import KMH_PER_MPS, Trip

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """The portal could not be reached or sent something we can't read."""


def _get_json(config: Config, endpoint: str) -> Any:
    url = f"{config.api_base}{endpoint}"
    logger.debug("GET %s", url)
    try:
        with httpx.Client(timeout=config.timeout) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.json()
    except httpx.HTTPStatusError as e:
        raise ApiError(f"HTTP {e.response.status_code} from {url}") from e
    except httpx.HTTPError as e:
        raise ApiError(f"{url}: {e}") from e
    except ValueError as e:
        # json.JSONDecodeError is a ValueError
        raise ApiError(f"Invalid JSON from {url}") from e


def fetch_speed(config: Config) -> float:
    """Fetch the current train speed, in m/s as the portal reports it."""
    data = _get_json(config, GPS_ENDPOINT)
    try:
        speed = data["speed"]
    except (KeyError, TypeError) as e:
        raise ApiError(f"Unexpected GPS payload: {data!r}") from e

    # bool is an int subclass
    if isinstance(speed, bool) or not isinstance(speed, (int, float)):
        raise ApiError(f"Unexpected GPS speed: {speed!r}")
    try:
        speed = float(speed)
    except OverflowError as e:
        raise ApiError(f"Unexpected GPS speed: {speed!r}") from e
    # json lets through Infinity, NaN and values that overflow once converted
    if not math.isfinite(speed * KMH_PER_MPS):
        raise ApiError(f"Unexpected GPS speed: {speed!r}")

    logger.debug("Speed reading: %s m/s", speed)
    return speed


def fetch_trip(config: Config) -> Trip:
    """Fetch the current trip with all of its stops."""
    data = _get_json(config, DETAILS_ENDPOINT)
    try:
        trip = Trip.from_api(data)
    except (KeyError, TypeError, ValueError) as e:
        raise ApiError(f"Unexpected trip payload: {e}") from e

    logger.debug("Trip has %d stops", len(trip.stops))
    return trip
