"""Thread-safe collector for solutions found by concurrent search branches."""

from threading import Lock
from typing import TypeAlias

Solution: TypeAlias = tuple[str, ...]


class SolutionSink:
    """Collects solutions appended from any number of threads.

    Every append happens under a single lock, so no solution is lost or duplicated.  The order of
    drained solutions is the order of the appends, which depends on thread scheduling: the *set*
    of solutions from a search is reproducible, their order is not.
    """

    def __init__(self) -> None:
        self._solutions: list[Solution] = []
        self._lock = Lock()

    def append(self, solution: Solution) -> None:
        """Add a solution to the sink."""
        with self._lock:
            self._solutions.append(solution)

    def extend(self, solutions: list[Solution]) -> None:
        """Add several solutions at once, e.g. the results of a worker process."""
        with self._lock:
            self._solutions.extend(solutions)

    def drain(self) -> list[Solution]:
        """Remove and return all collected solutions, in append order.

        Only call this once every search branch has finished.
        """
        with self._lock:
            solutions, self._solutions = self._solutions, []
        return solutions

    def __len__(self) -> int:
        with self._lock:
            return len(self._solutions)
