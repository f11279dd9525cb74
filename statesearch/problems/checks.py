from collections import deque

from ..core.problem import IllegalActionError


def sanity_check_problem(problem, max_states: int = 10_000, probe_action=object()):
    """
    Walks states breadth-first and checks the Problem contract on each one:
    ACTIONS is stable, step costs are never None, RESULT is deterministic
    (same action -> same fingerprint) and refuses an action it never offered.
    """
    seen = set()
    q = deque([problem])
    steps = 0
    while q and steps < max_states:
        p = q.popleft()
        fp = p.fingerprint()
        if fp in seen:
            continue
        seen.add(fp)
        if fp != p.fingerprint():
            raise AssertionError(f"fingerprint not stable for {p.describe()}")
        acts = list(p.actions())
        if acts != list(p.actions()):
            raise AssertionError(f"actions() order not stable for {p.describe()}")
        for a in acts:
            p2 = p.result(a)
            if p2.path_cost() is None:
                raise AssertionError(f"path_cost is None after {a!r} from {p.describe()}")
            if p2.fingerprint() != p.result(a).fingerprint():
                raise AssertionError(f"result({a!r}) not deterministic from {p.describe()}")
            q.append(p2)
        try:
            p.result(probe_action)
        except IllegalActionError:
            pass
        else:
            raise AssertionError(f"result() accepted an illegal action from {p.describe()}")
        steps += 1
    return f"OK: visited {len(seen)} states; contract holds."
