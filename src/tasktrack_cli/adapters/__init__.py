"""Adapters module - Repository implementations for storage backends.

- tsv: Local tab-separated text file storage
"""

from .tsv import TsvTaskStore

__all__ = ["TsvTaskStore"]
