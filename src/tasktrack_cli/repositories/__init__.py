"""Repository interfaces for tasktrack.

This package contains the abstract base class that defines the contract for
task persistence. The implementation (adapter) lives in
``tasktrack_cli.adapters.tsv``.
"""

from .repository import TaskRepository

__all__ = ["TaskRepository"]
