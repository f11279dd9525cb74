# statesearch/core/frontiers.py
# Open-list policies. Membership is by state fingerprint, so contains() is O(1) and duplicates are allowed.
from __future__ import annotations
import heapq
from collections import Counter, deque
from typing import Callable, Optional, Protocol

from .node import Node


class Frontier(Protocol):
    def add(self, node: Node) -> None: ...
    def remove(self) -> Optional[Node]: ...
    def is_empty(self) -> bool: ...
    def contains(self, node: Node) -> bool: ...
    def __len__(self) -> int: ...


class _Membership:
    """Multiset of fingerprints currently held by a frontier."""
    def __init__(self):
        self.seen = Counter()

    def _track(self, node: Node):
        self.seen[node.fingerprint] += 1

    def _untrack(self, node: Node):
        fp = node.fingerprint
        self.seen[fp] -= 1
        if self.seen[fp] <= 0:
            del self.seen[fp]

    def contains(self, node: Node) -> bool:
        return node.fingerprint in self.seen

    def __contains__(self, node: Node) -> bool:
        return self.contains(node)

    def is_empty(self) -> bool:
        return len(self) == 0


class FIFOQueue(_Membership):
    def __init__(self):
        super().__init__()
        self.q = deque()
    def add(self, node: Node):
        self.q.append(node)
        self._track(node)
    def remove(self) -> Optional[Node]:
        if not self.q:
            return None
        node = self.q.popleft()
        self._untrack(node)
        return node
    def __len__(self): return len(self.q)
    def peek(self) -> Optional[Node]: return self.q[0] if self.q else None


class LIFOStack(_Membership):
    def __init__(self):
        super().__init__()
        self.q = []
    def add(self, node: Node):
        self.q.append(node)
        self._track(node)
    def remove(self) -> Optional[Node]:
        if not self.q:
            return None
        node = self.q.pop()
        self._untrack(node)
        return node
    def __len__(self): return len(self.q)
    def peek(self) -> Optional[Node]: return self.q[-1] if self.q else None


class PriorityQueue(_Membership):
    """
    Min-heap by key(node), cumulative path cost unless told otherwise.

    Equal keys come out in insertion order (the counter breaks ties).
    There is no decrease-key: a cheaper route to a queued state is just pushed
    again, and the stale costlier copy is discarded by the caller's explored
    set when it finally surfaces.
    """
    def __init__(self, key: Callable[[Node], float] = lambda n: n.path_cost):
        super().__init__()
        self.key = key
        self.h = []
        self.counter = 0
    def add(self, node: Node):
        self.counter += 1
        heapq.heappush(self.h, (self.key(node), self.counter, node))
        self._track(node)
    def remove(self) -> Optional[Node]:
        if not self.h:
            return None
        node = heapq.heappop(self.h)[2]
        self._untrack(node)
        return node
    def __len__(self): return len(self.h)
    def peek(self) -> Optional[Node]:
        return self.h[0][2] if self.h else None
