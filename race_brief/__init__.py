"""Next race brief: schedule, history and circuit narrative for the upcoming F1 race."""

__version__ = "1.0.0"
