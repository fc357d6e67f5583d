"""flowc: the Flow compiler."""

__version__ = "2.0.0"
