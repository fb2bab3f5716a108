"""TSV adapter module - Local tab-separated file storage implementation."""

from tasktrack_cli.adapters.tsv.codec import decode_task, encode_task
from tasktrack_cli.adapters.tsv.task_store import TsvTaskStore

__all__ = ["TsvTaskStore", "decode_task", "encode_task"]
