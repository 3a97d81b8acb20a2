"""Home health assessment reports: readings in, scored reports out."""

__version__ = "1.0.0"
