"""Puzzle configurations and the loader for puzzle files."""

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from letterboxed.board import MIN_WORD_LENGTH, NUM_WALLS

VALID_LETTERS = re.compile(r"^[A-Z]+$")


@dataclass
class PuzzleConfig:
    """A puzzle configuration."""

    letters: str
    """The letters of the box, typed wall by wall (e.g. "ABCDEFGHIJKL" for four walls of three)."""

    n_words: int
    """The number of words in each solution."""

    def __post_init__(self) -> None:
        """Validate the configuration."""
        validate_letters(self.letters)
        max_words = self.max_words
        if not 1 <= self.n_words <= max_words:
            raise ValueError(
                f"Number of words must be between 1 and {max_words}, got {self.n_words}."
            )

    def __str__(self) -> str:
        """Return a string representation of the PuzzleConfig."""
        return f"{self.letters} ({self.n_words} words)"

    @property
    def max_words(self) -> int:
        """Largest allowed word count for these letters."""
        return max_words(self.letters)


def max_words(letters: str) -> int:
    """Largest word count a solution may have for the given letters."""
    return len(set(letters)) // MIN_WORD_LENGTH


def validate_letters(letters: str) -> None:
    """Check that a cleaned letter string can form a puzzle.

    Raises:
        ValueError: If the letters are not uppercase A-Z, their number is not a positive
            multiple of `NUM_WALLS`, or there are too few distinct letters for even one word.
    """
    if not letters or len(letters) % NUM_WALLS != 0:
        raise ValueError(
            f"Number of letters must be a positive multiple of {NUM_WALLS}, got {len(letters)}."
        )
    if not VALID_LETTERS.match(letters):
        raise ValueError(f"Letters must be uppercase A-Z, got {letters!r}.")
    if max_words(letters) < 1:
        raise ValueError(
            f"At least {MIN_WORD_LENGTH} distinct letters are needed, got {len(set(letters))}."
        )


def clean(letters: str) -> str:
    """Clean a letter string by removing whitespace and converting all letters to uppercase."""
    return "".join(letters.split()).upper()


def load_configs(configs_path: str | PathLike) -> list[PuzzleConfig]:
    """Load puzzle configurations from the given path.

    Each non-blank line holds the letters of one puzzle followed by the number of words, e.g.
    `ABC DEF GHI JKL 2`.  Whitespace inside the letters is ignored.  Lines starting with '#' are
    comments.
    """
    configs = []

    path = Path(configs_path).resolve()
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            *letter_parts, n_words_str = line.split()
            try:
                n_words = int(n_words_str)
            except ValueError:
                raise ValueError(
                    f"{path}:{line_no}: expected a word count at the end of the line, got "
                    f"'{n_words_str}'"
                ) from None
            if not letter_parts:
                raise ValueError(f"{path}:{line_no}: missing letters")
            configs.append(PuzzleConfig(letters=clean("".join(letter_parts)), n_words=n_words))

    return configs
