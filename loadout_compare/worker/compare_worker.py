"""
Background execution of loadout comparisons.

A full sweep can call the combat oracle hundreds of times, so presentation
layers run comparisons off their own thread. Only the newest request
matters: submitting a new one cancels a comparison that has not started yet
and discards the result of one that is already running.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional
import concurrent.futures
import logging
import threading

from loadout_compare.calc.oracle import CombatOracle
from loadout_compare.calc.scaling import MonsterScaler
from loadout_compare.comparator.comparator import run_comparison
from loadout_compare.config import ComparatorConfig
from loadout_compare.data_models import (
    CompareResult,
    CompareXAxis,
    CompareYAxis,
    Loadout,
    Monster,
    coerce_axis,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompareRequest:
    """Everything one comparison needs, as sent by a presentation layer."""

    loadouts: tuple[Loadout, ...]
    monster: Monster
    x_axis: CompareXAxis
    y_axis: CompareYAxis

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CompareRequest":
        """
        Create from a request payload.

        Expected shape: {"loadouts": [...], "monster": {...},
        "axes": {"x": <x axis>, "y": <y axis>}}
        """
        axes = data.get("axes") or {}
        if "monster" not in data or "x" not in axes or "y" not in axes:
            raise ValueError("Missing required fields: monster/axes.x/axes.y")
        return cls(
            loadouts=tuple(Loadout.from_dict(l) for l in data.get("loadouts", [])),
            monster=Monster.from_dict(data["monster"]),
            x_axis=coerce_axis(CompareXAxis, axes["x"]),
            y_axis=coerce_axis(CompareYAxis, axes["y"]),
        )


@dataclass
class CompareWorker:
    """
    Runs comparisons on a thread pool, keeping only the newest result.

    Usage:
        with CompareWorker(oracle, scaler) as worker:
            future = worker.submit(request)
            result = future.result()
    """

    oracle: CombatOracle
    scaler: MonsterScaler
    config: Optional[ComparatorConfig] = None
    max_workers: int = 1
    executor: Optional[concurrent.futures.ThreadPoolExecutor] = None
    latest_result: Optional[CompareResult] = field(default=None, init=False)
    _generation: int = field(default=0, init=False, repr=False)
    _current: Optional[concurrent.futures.Future] = field(default=None, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def start(self) -> "CompareWorker":
        with self._lock:
            self._ensure_executor()
        return self

    def _ensure_executor(self) -> None:
        # Caller holds _lock
        if self.executor is None:
            self.executor = concurrent.futures.ThreadPoolExecutor(
                max_workers=max(1, self.max_workers),
                thread_name_prefix="compare",
            )

    def close(self) -> None:
        with self._lock:
            executor, self.executor = self.executor, None
        if executor is not None:
            executor.shutdown(wait=True)

    def __enter__(self) -> "CompareWorker":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def submit(self, request: CompareRequest) -> concurrent.futures.Future:
        """
        Start a comparison, superseding any earlier one.

        Returns:
            Future resolving to the CompareResult. Configuration errors such
            as an unsupported axis surface from future.result().
        """
        with self._lock:
            self._ensure_executor()
            self._generation += 1
            generation = self._generation
            if self._current is not None and not self._current.done():
                self._current.cancel()
            future = self.executor.submit(self._run, generation, request)
            self._current = future
        return future

    def compare(self, request: CompareRequest) -> CompareResult:
        """Submit a comparison and wait for it."""
        return self.submit(request).result()

    def is_current(self, future: concurrent.futures.Future) -> bool:
        with self._lock:
            return future is self._current

    def _run(self, generation: int, request: CompareRequest) -> CompareResult:
        try:
            result = run_comparison(
                request.loadouts,
                request.monster,
                request.x_axis,
                request.y_axis,
                self.oracle,
                self.scaler,
                self.config,
            )
        except Exception as e:
            logger.error(f"Comparison #{generation} failed: {e}")
            raise
        with self._lock:
            if generation == self._generation:
                self.latest_result = result
            else:
                logger.warning(f"Discarding superseded comparison #{generation}")
        return result
