"""Per-user notes API with word-frequency reports."""

__version__ = "0.1.0"
