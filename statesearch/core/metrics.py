# statesearch/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List, Optional
import logging, time, tracemalloc

from .node import Node
from .problem import Problem
from .utils import reconstruct_path

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    algo: str
    success: bool
    actions: List[Any] = field(default_factory=list)
    cost: float = float("inf")
    depth: Optional[int] = None
    nodes_expanded: int = 0
    time_s: float = 0.0
    peak_kb: int = 0
    error: Optional[str] = None

    def to_row(self) -> Dict[str, Any]:
        row = asdict(self)
        row["actions"] = [str(a) for a in self.actions]
        # json has no infinity
        row["cost"] = None if self.cost == float("inf") else self.cost
        return row


class ExpansionCounter:
    """on_expand observer that just counts."""
    def __init__(self) -> None:
        self.count = 0

    def __call__(self, node: Node) -> None:
        self.count += 1


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    """
    def __init__(self, track_memory: bool = True) -> None:
        self.track_memory = track_memory
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False

    def __enter__(self) -> "MeasuredRun":
        if self.track_memory and not tracemalloc.is_tracing():
            tracemalloc.start()
            self._tracing = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        if self._tracing:
            _, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb


def run_search(name: str, search: Callable[..., Optional[Node]], problem: Problem,
               track_memory: bool = True, **kwargs) -> SearchResult:
    """
    Run search(problem, on_expand=..., **kwargs) and package the outcome.
    Exceptions are recorded on the result instead of propagating, so one
    broken strategy doesn't take down a whole benchmark table.
    """
    counter = ExpansionCounter()
    meter = MeasuredRun(track_memory=track_memory)
    try:
        with meter:
            node = search(problem, on_expand=counter, **kwargs)
    except Exception as e:
        logger.warning("%s failed: %r", name, e)
        return SearchResult(name, False, nodes_expanded=counter.count,
                            time_s=meter.elapsed, peak_kb=meter.peak_kb, error=repr(e))

    actions, cost = reconstruct_path(node)
    return SearchResult(
        algo=name,
        success=node is not None,
        actions=actions,
        cost=cost,
        depth=None if node is None else node.depth,
        nodes_expanded=counter.count,
        time_s=meter.elapsed,
        peak_kb=meter.peak_kb,
    )
