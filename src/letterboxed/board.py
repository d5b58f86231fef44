"""Classes and functions for representing the letter box."""

NUM_WALLS = 4
"""Number of walls (sides) of the letter box."""

MIN_WORD_LENGTH = 3
"""Minimum length of a playable word."""


class LetterBox:
    """Store the walls of a Letter Boxed puzzle.

    The letters are split into `NUM_WALLS` contiguous walls of equal length, in input order.
    Each letter is mapped to the index of its wall.  Puzzles are assumed not to repeat letters;
    if a letter does appear more than once, the wall of its *first* occurrence is used for all
    lookups.
    """

    def __init__(self, letters: str) -> None:
        if not letters or len(letters) % NUM_WALLS != 0:
            raise ValueError(
                f"Number of letters must be a positive multiple of {NUM_WALLS}, "
                f"got {len(letters)}."
            )
        wall_len = len(letters) // NUM_WALLS

        self.walls: tuple[tuple[str, ...], ...] = tuple(
            tuple(letters[i : i + wall_len]) for i in range(0, len(letters), wall_len)
        )
        """The walls of the box, each an ordered tuple of letters."""

        wall_of: dict[str, int] = {}
        for wall_idx, wall in enumerate(self.walls):
            for ch in wall:
                wall_of.setdefault(ch, wall_idx)  # First occurrence wins
        self._wall_of = wall_of

        self.letters: frozenset[str] = frozenset(wall_of)
        """The set of all letters in the box."""

    def __str__(self) -> str:
        """Returns the walls joined by dashes, e.g. `ABC-DEF-GHI-JKL`."""
        return "-".join("".join(wall) for wall in self.walls)

    def __repr__(self) -> str:
        return f"LetterBox({''.join(''.join(wall) for wall in self.walls)!r})"

    @property
    def num_letters(self) -> int:
        """Number of distinct letters in the box."""
        return len(self.letters)

    @property
    def max_words(self) -> int:
        """Largest word count a solution may be asked for."""
        return self.num_letters // MIN_WORD_LENGTH

    def contains(self, letter: str) -> bool:
        """Returns whether the letter is in the box."""
        return letter in self._wall_of

    def wall_index(self, letter: str) -> int:
        """Returns the index of the wall the letter belongs to.

        Raises:
            KeyError: If the letter is not in the box.
        """
        try:
            return self._wall_of[letter]
        except KeyError:
            raise KeyError(f"Letter {letter!r} is not in the box.") from None

    def wall(self, letter: str) -> tuple[str, ...]:
        """Returns the wall the letter belongs to."""
        return self.walls[self.wall_index(letter)]

    def on_same_wall(self, letter1: str, letter2: str) -> bool:
        """Returns whether two letters are on the same wall.

        Letters not in the box are never on the same wall as anything.
        """
        wall1 = self._wall_of.get(letter1)
        if wall1 is None:
            return False
        return wall1 == self._wall_of.get(letter2)

    def can_make_word(self, word: str) -> bool:
        """Returns whether a word can be typed within the box."""
        if len(word) < MIN_WORD_LENGTH:
            return False

        prev_wall = None
        for ch in word:
            wall = self._wall_of.get(ch)
            if wall is None or wall == prev_wall:
                return False
            prev_wall = wall
        return True
