"""tasktrack CLI - a single-user task tracker backed by a TSV file."""

__version__ = "0.1.0"
