"""Wifi connectivity probe: are we on the train's network?"""

import logging
import subprocess

from .config import WIFI_MARKER

logger = logging.getLogger(__name__)


def check_connected(marker: str = WIFI_MARKER) -> bool:
    """
    Look for the train network name in the iwconfig output.

    Any failure (iwconfig missing, timing out, or printing something that is
    not UTF-8) counts as not connected.
    """
    try:
        result = subprocess.run(
            ["iwconfig"],
            capture_output=True,
            timeout=5
        )
        output = result.stdout.decode("utf-8")
    except (OSError, subprocess.SubprocessError, UnicodeDecodeError) as e:
        logger.debug("Wifi probe failed: %s", e)
        return False

    return marker in output
