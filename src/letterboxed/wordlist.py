"""Module for word list management in Letter Boxed."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import TypeAlias

from sortedcontainers import SortedSet

from letterboxed.board import LetterBox

WordGroup: TypeAlias = SortedSet | set


@dataclass(frozen=True, order=True)
class Word:
    """A candidate word, together with its set of distinct letters.

    Equality, hashing and ordering depend only on the text of the word.
    """

    text: str
    """The word itself."""

    letters: frozenset[str] = field(init=False, compare=False, repr=False)
    """Distinct letters of the word, computed once on creation."""

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Word must not be empty.")
        object.__setattr__(self, "letters", frozenset(self.text))

    @property
    def n_unique(self) -> int:
        """Number of distinct letters in the word."""
        return len(self.letters)

    @property
    def first(self) -> str:
        return self.text[0]

    @property
    def last(self) -> str:
        return self.text[-1]

    def __len__(self) -> int:
        return len(self.text)

    def __getitem__(self, index: int) -> str:
        """Get a character of the word.

        Raises:
            IndexError: If `index` is outside `[0, len(word))`.  Negative indices are not allowed.
        """
        if not 0 <= index < len(self.text):
            raise IndexError(f"Index {index} out of range for word {self.text!r}.")
        return self.text[index]

    def __str__(self) -> str:
        return self.text


def file_exists(path: str | PathLike) -> bool:
    """Returns whether the given path is an existing file."""
    return Path(path).is_file()


def load_word_list(path: str | PathLike) -> Iterator[str]:
    """Lazily read words from a dictionary file, one word per line.

    Lines are stripped and converted to uppercase; blank lines are skipped.

    Raises:
        FileNotFoundError: If the dictionary file does not exist.  Raised on the first call to
            `next()`, since this is a generator.
    """
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    with word_list_path.open("r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().upper()
            if word:
                yield word


class WordIndex:
    """Playable words for a letter box, grouped by their first letter.

    Built once via `WordIndex.build` and never modified afterwards, so a single index can be read
    by any number of search threads at once.
    """

    def __init__(self, groups: dict[str, WordGroup], *, deterministic: bool = True) -> None:
        self._groups = groups
        self._empty: WordGroup = SortedSet() if deterministic else set()
        self.deterministic = deterministic

    @classmethod
    def build(
        cls, board: LetterBox, words: Iterable[str], *, deterministic: bool = True
    ) -> "WordIndex":
        """Filter a stream of words against the board and index the survivors.

        Args:
            board (LetterBox): The puzzle board.
            words (Iterable[str]): Candidate words, already normalised (no whitespace handling or
                case conversion is done here).
            deterministic (bool): If True, each group is a `SortedSet`, so that the search visits
                words in a fixed order.  Otherwise, plain sets are used.
        """
        groups: dict[str, WordGroup] = {}
        for text in words:
            if not board.can_make_word(text):
                continue
            group = groups.get(text[0])
            if group is None:
                group = groups[text[0]] = SortedSet() if deterministic else set()
            group.add(Word(text))
        return cls(groups, deterministic=deterministic)

    def words_starting_with(self, letter: str) -> WordGroup:
        """Return the words beginning with `letter` (possibly an empty group)."""
        return self._groups.get(letter, self._empty)

    @property
    def starting_letters(self) -> set[str]:
        """Letters that at least one indexed word starts with."""
        return set(self._groups)

    def words(self) -> Iterator[Word]:
        """Iterate over every indexed word."""
        for group in self._groups.values():
            yield from group

    def __len__(self) -> int:
        return sum(len(group) for group in self._groups.values())

    def summary(self) -> dict[str, int]:
        """Return the number of words per starting letter, for logging."""
        return {letter: len(self._groups[letter]) for letter in sorted(self._groups)}
