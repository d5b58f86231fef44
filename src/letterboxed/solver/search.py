"""Exhaustive backtracking search for Letter Boxed word chains."""

from collections.abc import Set

from letterboxed.board import LetterBox
from letterboxed.solver.sink import SolutionSink
from letterboxed.wordlist import Word, WordIndex


def search(
    board: LetterBox,
    words_left: int,
    last_char: str,
    remaining: Set[str],
    chosen: tuple[Word, ...],
    index: WordIndex,
    sink: SolutionSink,
) -> int:
    """Find every chain completing `chosen` and add each one to `sink`.

    Args:
        board (LetterBox): The puzzle board.
        words_left (int): Number of words still to choose.
        last_char (str): The letter the next word must start with.
        remaining (Set[str]): Board letters not yet used by `chosen`.
        chosen (tuple[Word, ...]): Words chosen so far in this branch.
        index (WordIndex): Playable words grouped by starting letter.  Read only.
        sink (SolutionSink): Shared collector for finished chains.

    Returns:
        The number of solutions added to `sink` by this call.

    Raises:
        ValueError: If `words_left` is negative or `last_char` is not in the box.
    """
    if words_left < 0:
        raise ValueError(f"words_left must be non-negative, got {words_left}.")
    if not board.contains(last_char):
        raise ValueError(f"Starting letter {last_char!r} is not in the box.")
    return _extend(words_left, last_char, frozenset(remaining), chosen, index, sink)


def _extend(
    words_left: int,
    last_char: str,
    remaining: frozenset[str],
    chosen: tuple[Word, ...],
    index: WordIndex,
    sink: SolutionSink,
) -> int:
    if words_left == 0:
        if remaining:
            return 0
        sink.append(tuple(word.text for word in chosen))
        return 1

    candidates = index.words_starting_with(last_char)
    if not candidates:
        return 0

    n_found = 0
    is_last_word = words_left == 1
    n_remaining = len(remaining)
    for word in candidates:
        # The final word must be able to cover everything that is left
        if is_last_word and n_remaining > word.n_unique:
            continue
        n_found += _extend(
            words_left - 1,
            word.last,
            remaining - word.letters,
            chosen + (word,),
            index,
            sink,
        )
    return n_found
