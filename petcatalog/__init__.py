"""Pet catalog: a content provider over a SQL pets table."""

__version__ = "0.1.0"
