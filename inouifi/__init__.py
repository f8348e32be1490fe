"""inouifi — information about the current train from its on-board wifi portal."""

__version__ = "0.1.0"
