"""Error hints printed to stderr."""

from rich.console import Console
from rich.text import Text

SPEED_HINT = "Could not fetch the speed, are you connected to the train's wifi?"
TRIP_HINT = "Could not fetch train details, are you connected to the train's wifi?"


def print_error_hint(console: Console, hint: str) -> None:
    console.print(Text(hint, style="bold red"))
