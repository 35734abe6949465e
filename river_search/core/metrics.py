# river_search/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import time, tracemalloc

EXHAUSTED = "exhausted"
EXPANSION_LIMIT = "expansion limit"


@dataclass
class SearchResult:
    algo: str
    success: bool
    actions: List[Any] = field(default_factory=list)
    cost: float = float("inf")
    nodes_expanded: int = 0
    nodes_generated: int = 0
    time_s: float = 0.0
    peak_kb: int = 0
    error: Optional[str] = None

    @property
    def exhausted(self) -> bool:
        """True when the whole reachable space was searched without meeting a goal."""
        return not self.success and self.error == EXHAUSTED

    def as_row(self) -> Dict[str, Any]:
        return {
            "algo": self.algo,
            "success": self.success,
            "cost": self.cost if self.success else None,
            "nodes_expanded": self.nodes_expanded,
            "nodes_generated": self.nodes_generated,
            "time_s": self.time_s,
            "peak_kb": self.peak_kb,
            "error": self.error,
        }


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._owns_trace: bool = False

    def __enter__(self) -> "MeasuredRun":
        # leave an outer tracemalloc session (e.g. a profiler) running on exit
        self._owns_trace = not tracemalloc.is_tracing()
        if self._owns_trace:
            tracemalloc.start()
        else:
            tracemalloc.reset_peak()
        self._tracing = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        current, peak = tracemalloc.get_traced_memory()
        if self._owns_trace:
            tracemalloc.stop()
        self._tracing = False
        self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
