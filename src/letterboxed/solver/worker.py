"""Worker-side state and tasks for the process-pool solver."""

from dataclasses import dataclass
from multiprocessing.sharedctypes import Synchronized

from letterboxed.board import LetterBox
from letterboxed.solver.search import search
from letterboxed.solver.sink import Solution, SolutionSink
from letterboxed.wordlist import WordIndex


@dataclass(kw_only=True)
class WorkerState:
    """Global state maintained by each worker process."""

    worker_idx: int
    """Index of the worker process."""

    board: LetterBox
    """The puzzle board."""

    index: WordIndex
    """Word index rebuilt in this process from the filtered word list."""


worker_state: WorkerState | None = None
"""Global state for each worker process."""


def init_worker_globals(
    worker_ctr: "Synchronized[int]",
    letters: str,
    words: list[str],
    deterministic: bool,
) -> None:
    """Initialize global variables for worker processes.

    Args:
        worker_ctr (Synchronized[int]): Shared counter for workers.
        letters (str): The letters of the box, wall by wall.
        words (list[str]): Words already admitted to the parent's index.
        deterministic (bool): Whether to build sorted word groups.
    """
    global worker_state  # noqa: PLW0603
    with worker_ctr.get_lock():
        # Get and set the shared worker counter atomically, using the obtained value
        # as the worker index
        worker_idx = worker_ctr.value
        worker_ctr.value += 1

    board = LetterBox(letters)
    worker_state = WorkerState(
        worker_idx=worker_idx,
        board=board,
        index=WordIndex.build(board, words, deterministic=deterministic),
    )


def worker_task(start_letter: str, n_words: int) -> list[Solution]:
    """Search all chains of `n_words` words starting with `start_letter`.

    Solutions are collected in a process-local sink and returned to the parent, which merges
    them into the shared sink.
    """
    if worker_state is None:
        raise RuntimeError("Worker globals not initialized.")
    sink = SolutionSink()
    search(
        worker_state.board,
        n_words,
        start_letter,
        worker_state.board.letters,
        (),
        worker_state.index,
        sink,
    )
    return sink.drain()
