"""uniqcount - count repeated lines and print them by descending count."""

__version__ = "0.1.0"
