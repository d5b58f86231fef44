"""Implementation of the parallel solver: one search branch per starting letter."""

import traceback
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from multiprocessing import Value
from typing import Literal, TextIO

from letterboxed.board import LetterBox
from letterboxed.solver.search import search
from letterboxed.solver.sink import Solution, SolutionSink
from letterboxed.solver.worker import init_worker_globals, worker_task
from letterboxed.wordlist import WordIndex

ExecutorKind = Literal["thread", "process"]


@dataclass
class Result:
    """Wrapper for the outcome of one search branch."""

    start_letter: str
    status: Literal["success", "no_solution", "error"]
    n_solutions: int = 0
    solutions: list[Solution] = field(default_factory=list)
    """Solutions returned by a worker process (empty for thread branches, which write directly
    into the shared sink)."""
    err_msg: str | None = None


def get_executor(
    kind: ExecutorKind,
    *,
    n_workers: int,
    board: LetterBox,
    index: WordIndex,
) -> Executor:
    """Get an executor for the search branches.

    Args:
        kind (ExecutorKind): "thread" for a thread pool sharing `board` and `index` directly,
            "process" for a process pool whose workers rebuild them once at startup.
        n_workers (int): Number of workers to create.
        board (LetterBox): The puzzle board.
        index (WordIndex): The word index built in this process.

    Returns:
        An Executor instance.
    """
    if n_workers < 1:
        raise ValueError(f"Number of workers must be positive, got {n_workers}.")
    if kind == "thread":
        return ThreadPoolExecutor(max_workers=n_workers, thread_name_prefix="letterboxed")
    if kind == "process":
        worker_ctr = Value("i", 0)
        letters = "".join("".join(wall) for wall in board.walls)
        return ProcessPoolExecutor(
            max_workers=n_workers,
            initializer=init_worker_globals,
            initargs=(
                worker_ctr,
                letters,
                [word.text for word in index.words()],
                index.deterministic,
            ),
        )
    raise ValueError(f"Unknown executor kind: {kind!r}")


def solve_parallel(
    board: LetterBox,
    index: WordIndex,
    n_words: int,
    sink: SolutionSink,
    logf: TextIO,
    *,
    kind: ExecutorKind = "thread",
    max_workers: int | None = None,
) -> None:
    """Run one search branch per distinct letter of the box and wait for all of them.

    Args:
        board (LetterBox): The puzzle board.
        index (WordIndex): Playable words grouped by starting letter.
        n_words (int): Number of words in each solution.
        sink (SolutionSink): Collector for every solution found.
        logf: File object to log the solving process.
        kind (ExecutorKind): Kind of worker pool to use.
        max_workers (int | None): Cap on the number of workers.  If None, one worker is used per
            starting letter.

    Raises:
        RuntimeError: If any branch failed.  All other branches still run to completion, and
            their solutions remain in `sink`.
    """
    start_letters = sorted(board.letters) if index.deterministic else list(board.letters)
    n_workers = len(start_letters) if max_workers is None else min(max_workers, len(start_letters))

    print(
        f"Starting {len(start_letters)} branches on {n_workers} {kind} worker(s)...",
        file=logf,
        flush=True,
    )

    failed: list[str] = []
    with get_executor(kind, n_workers=n_workers, board=board, index=index) as executor:
        if kind == "thread":
            futures = [
                executor.submit(_thread_task, board, index, n_words, letter, sink)
                for letter in start_letters
            ]
        else:
            futures = [
                executor.submit(_process_task, letter, n_words) for letter in start_letters
            ]

        for future in as_completed(futures):
            try:
                result = future.result()
            except Exception as e:
                # Covers failures outside the task wrapper, e.g. a broken process pool
                print(f"Error retrieving branch result: {str(e)}", flush=True)
                print(traceback.format_exc(), file=logf, flush=True)
                failed.append("?")
                continue

            if result.status == "error":
                print(
                    f"Branch for starting letter '{result.start_letter}' encountered an error:",
                    flush=True,
                )
                print(result.err_msg, file=logf, flush=True)
                failed.append(result.start_letter)
                continue

            if result.solutions:
                sink.extend(result.solutions)
            print(
                f"  {result.start_letter}: {result.n_solutions} solution(s)",
                file=logf,
                flush=True,
            )

    if failed:
        raise RuntimeError(
            f"{len(failed)} search branch(es) failed "
            f"(starting letters: {', '.join(sorted(failed))})."
        )


def _thread_task(
    board: LetterBox, index: WordIndex, n_words: int, start_letter: str, sink: SolutionSink
) -> Result:
    """Search one branch in the current thread, writing straight into the shared sink."""
    try:
        n_found = search(board, n_words, start_letter, board.letters, (), index, sink)
        return Result(
            start_letter=start_letter,
            status="success" if n_found else "no_solution",
            n_solutions=n_found,
        )
    except Exception as e:
        return Result(
            start_letter=start_letter,
            status="error",
            err_msg=f"Branch encountered an error: {str(e)}\n{traceback.format_exc()}",
        )


def _process_task(start_letter: str, n_words: int) -> Result:
    """Search one branch in a worker process and ship its solutions back."""
    try:
        solutions = worker_task(start_letter, n_words)
        return Result(
            start_letter=start_letter,
            status="success" if solutions else "no_solution",
            n_solutions=len(solutions),
            solutions=solutions,
        )
    except Exception as e:
        return Result(
            start_letter=start_letter,
            status="error",
            err_msg=f"Worker encountered an error: {str(e)}\n{traceback.format_exc()}",
        )
