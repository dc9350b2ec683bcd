"""Background execution of comparisons."""

from loadout_compare.worker.compare_worker import CompareRequest, CompareWorker

__all__ = [
    "CompareRequest",
    "CompareWorker",
]
