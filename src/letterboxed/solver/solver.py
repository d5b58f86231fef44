"""Main solver module for Letter Boxed puzzles."""

import sys
from collections.abc import Iterable, Sequence
from datetime import datetime
from os import PathLike
from pathlib import Path
from pprint import pprint
from time import time
from typing import TextIO

from letterboxed.board import LetterBox
from letterboxed.puzzle_config import PuzzleConfig
from letterboxed.solver.config import config as solver_config
from letterboxed.solver.parallel import ExecutorKind, solve_parallel
from letterboxed.solver.sink import Solution, SolutionSink
from letterboxed.solver.utils import TIMESTAMP_FMT, int_comma, time_str, validate_solution
from letterboxed.wordlist import WordIndex, file_exists, load_word_list


def run(
    config: PuzzleConfig,
    *,
    word_list_path: str | PathLike | None = None,
    output_path: str | PathLike | None = None,
    kind: ExecutorKind | None = None,
) -> list[Solution]:
    """Run the solver on the given configuration.

    A log of the run is written to `<log_dir>/<letters>-<n_words>.log`.

    Args:
        config (PuzzleConfig): The configuration for the puzzle to solve.
        word_list_path: Dictionary file to use.  Defaults to `word_list_path` from the solver
            config.
        output_path: If given, the solutions are also written to this file.
        kind (ExecutorKind | None): Worker pool kind.  Defaults to the solver config.

    Returns:
        The list of solutions found.

    Raises:
        FileNotFoundError: If the dictionary file does not exist.  No log file is created.
    """
    print(f"config: {config}")
    if word_list_path is None:
        word_list_path = solver_config.word_list_path
    if not file_exists(word_list_path):
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    logfile = Path(solver_config.log_dir) / f"{config.letters}-{config.n_words}.log"
    print(f"Log file: {logfile}")
    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            solutions = solve_one(
                config, words=load_word_list(word_list_path), logf=logf, kind=kind
            )
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)

    print(f"{int_comma(len(solutions))} solution(s) found!")
    if output_path is not None:
        write_solutions(output_path, solutions)
        print(f"Solutions written to {output_path}")
    return solutions


def solve_one(
    puzzle_config: PuzzleConfig,
    *,
    words: Iterable[str],
    logf: TextIO,
    kind: ExecutorKind | None = None,
    max_workers: int | None = None,
) -> list[Solution]:
    """Find every solution to a Letter Boxed puzzle.

    Args:
        puzzle_config (PuzzleConfig): The configuration for the puzzle to solve.
        words (Iterable[str]): Normalised dictionary words, consumed once.
        logf: File object to log the solving process.
        kind (ExecutorKind | None): Worker pool kind.  Defaults to the solver config.
        max_workers (int | None): Cap on the number of workers.  Defaults to the solver config.

    Returns:
        All solutions.  Sorted if the solver runs in deterministic mode, otherwise in the
        (scheduling-dependent) order they were found.
    """
    if kind is None:
        kind = solver_config.executor
    if max_workers is None:
        max_workers = solver_config.max_workers

    start_time = time()
    start_time_str = datetime.fromtimestamp(start_time).astimezone().strftime(TIMESTAMP_FMT)
    print(f"Start time: {start_time_str}", file=logf, flush=True)
    print("Solver config:", file=logf, flush=True)
    pprint(solver_config.model_dump(), stream=logf, width=120)

    board = LetterBox(puzzle_config.letters)
    print(f"Letter box: {board}", file=logf, flush=True)
    print(f"Number of words: {puzzle_config.n_words}", file=logf, flush=True)

    index = WordIndex.build(board, words, deterministic=solver_config.deterministic)
    print(f"Playable words: {int_comma(len(index))}", file=logf, flush=True)
    print("Words per starting letter:", file=logf, flush=True)
    pprint(index.summary(), stream=logf, width=120)
    print("", file=logf, flush=True)

    sink = SolutionSink()
    solve_parallel(
        board,
        index,
        puzzle_config.n_words,
        sink,
        logf,
        kind=kind,
        max_workers=max_workers,
    )
    solutions = sink.drain()

    if solver_config.validate_solutions:
        invalid = [s for s in solutions if not validate_solution(board, s, puzzle_config.n_words)]
        if invalid:
            raise RuntimeError(f"Search produced {len(invalid)} invalid solution(s): {invalid[:5]}")

    if solver_config.deterministic:
        solutions.sort()

    print("", file=logf, flush=True)
    print(f"Solutions found: {int_comma(len(solutions))}", file=logf, flush=True)
    print(f"Time taken: {time_str(time() - start_time)}", file=logf, flush=True)
    return solutions


def write_solutions(path: str | PathLike, solutions: Sequence[Solution]) -> None:
    """Write solutions to a file, one solution per line with words separated by spaces."""
    with open(path, "w", encoding="utf-8") as f:
        for solution in solutions:
            print(" ".join(solution), file=f)
