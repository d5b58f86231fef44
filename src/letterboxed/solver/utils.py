"""Utility functions for the Letter Boxed solver."""

from collections.abc import Sequence

from letterboxed.board import LetterBox

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.ss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"


def validate_solution(board: LetterBox, solution: Sequence[str], n_words: int) -> bool:
    """Validate that a chain of words solves the puzzle.

    Checks that the chain has `n_words` words, each at least the minimum length, that every
    word starts with the last letter of the previous one, that no two consecutive letters
    (within a word or across a word boundary) share a wall, and that every letter of the box is
    used.
    """
    if len(solution) != n_words:
        return False

    used: set[str] = set()
    prev_word = None
    for word in solution:
        if not board.can_make_word(word):
            return False
        # The joining letter is shared, so the word boundary adds no new adjacent pair
        if prev_word is not None and word[0] != prev_word[-1]:
            return False
        used.update(word)
        prev_word = word

    return used == board.letters
