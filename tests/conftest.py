"""Shared fixtures for the Letter Boxed solver tests."""

import pytest

from letterboxed.board import LetterBox
from letterboxed.wordlist import WordIndex

LETTERS = "ABCDEFGHIJKL"
"""Four walls: ABC, DEF, GHI, JKL."""

WORDS = [
    "ADGJBEHK",
    "KCFIL",
    "ADGJ",
    "JBEHKCFIL",
    "KCF",
    "KCFI",
    "LAD",
    # Not playable: too short, same-wall neighbours, letters outside the box
    "AB",
    "ABD",
    "AD",
    "ADX",
    "ADGQ",
]

TWO_WORD_SOLUTIONS = {
    ("ADGJ", "JBEHKCFIL"),
    ("ADGJBEHK", "KCFIL"),
}

THREE_WORD_SOLUTIONS = {
    ("ADGJ", "JBEHKCFIL", "LAD"),
    ("ADGJBEHK", "KCFIL", "LAD"),
}


@pytest.fixture
def board() -> LetterBox:
    return LetterBox(LETTERS)


@pytest.fixture
def index(board: LetterBox) -> WordIndex:
    return WordIndex.build(board, WORDS)


@pytest.fixture
def word_file(tmp_path):
    """Dictionary file in the on-disk format: mixed case and stray whitespace."""
    path = tmp_path / "dictionary.txt"
    path.write_text("\n".join(f"  {w.lower()} " for w in WORDS) + "\n\n", encoding="utf-8")
    return path
