# Defines the standard interface for any searchable domain (one instance = one state snapshot).
# statesearch/core/problem.py
from __future__ import annotations
import hashlib
from typing import Hashable, Protocol, Sequence

Action = Hashable


class IllegalActionError(ValueError):
    """RESULT was asked to apply an action that ACTIONS never offered. Not recoverable."""


class Problem(Protocol):
    """
    Searchable domain, state-snapshot view.

    Every instance stands for exactly one state and is immutable:
    result() hands back a *new* Problem, it never changes self.

    - actions():      legal actions, in a stable order (tie-breaking depends on it)
    - result(a):      successor Problem; IllegalActionError if a not in actions()
    - test_goal():    pure goal predicate
    - path_cost():    cost of the single step that produced this state (not cumulative)
    - value():        domain-defined number (e.g. a heuristic); the engine ignores it
    - describe():     human-readable text, diagnostics only
    - fingerprint():  pure digest of the state; equal states -> equal fingerprints
    """
    def actions(self) -> Sequence[Action]: ...
    def result(self, action: Action) -> Problem: ...
    def test_goal(self) -> bool: ...
    def path_cost(self) -> float: ...
    def fingerprint(self) -> int: ...

    def value(self) -> float:
        return 0.0

    def describe(self) -> str:
        return repr(self)


def require_legal(problem: Problem, action: Action) -> None:
    legal = list(problem.actions())
    if action not in legal:
        raise IllegalActionError(
            f"action {action!r} is not legal here (legal: {legal!r}) in {problem.describe()}"
        )


def stable_fingerprint(*parts) -> int:
    """64-bit blake2b digest of repr(parts); unlike hash() it does not change between processes."""
    digest = hashlib.blake2b(repr(parts).encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "big")
