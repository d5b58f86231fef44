"""Tests for the LetterBox class."""

import pytest

from letterboxed.board import MIN_WORD_LENGTH, NUM_WALLS, LetterBox


def test_walls_split_in_input_order(board):
    assert board.walls == (("A", "B", "C"), ("D", "E", "F"), ("G", "H", "I"), ("J", "K", "L"))
    assert str(board) == "ABC-DEF-GHI-JKL"
    assert board.letters == frozenset("ABCDEFGHIJKL")
    assert board.num_letters == 12
    assert board.max_words == 12 // MIN_WORD_LENGTH


@pytest.mark.parametrize("letters", ["", "ABC", "ABCDE", "ABCDEFGHIJK"])
def test_rejects_bad_letter_count(letters):
    with pytest.raises(ValueError, match=f"multiple of {NUM_WALLS}"):
        LetterBox(letters)


def test_one_letter_per_wall():
    box = LetterBox("ABCD")
    assert box.walls == (("A",), ("B",), ("C",), ("D",))
    assert box.can_make_word("ABA")
    assert not box.can_make_word("AAB")


def test_contains(board):
    assert board.contains("A")
    assert board.contains("L")
    assert not board.contains("M")
    assert not board.contains("a")


def test_on_same_wall(board):
    assert board.on_same_wall("A", "C")
    assert board.on_same_wall("A", "A")
    assert not board.on_same_wall("A", "D")
    assert not board.on_same_wall("A", "Z")
    assert not board.on_same_wall("Z", "Z")


def test_on_same_wall_is_symmetric(board):
    letters = sorted(board.letters) + ["X"]
    for a in letters:
        for b in letters:
            assert board.on_same_wall(a, b) == board.on_same_wall(b, a)


def test_wall_lookup(board):
    assert board.wall_index("E") == 1
    assert board.wall("E") == ("D", "E", "F")
    with pytest.raises(KeyError):
        board.wall_index("Z")


def test_duplicate_letter_uses_first_wall():
    box = LetterBox("ABCDEAGHIJKL")
    assert box.wall_index("A") == 0
    assert box.walls[1] == ("D", "E", "A")
    assert box.num_letters == 11
    assert box.on_same_wall("A", "B")
    assert not box.on_same_wall("A", "E")


@pytest.mark.parametrize(
    "word, expected",
    [
        ("ADG", True),
        ("ADGJBEHKCFIL", True),
        ("LAD", True),
        ("AD", False),  # too short
        ("ABD", False),  # A and B share a wall
        ("ADD", False),  # repeated letter is on its own wall
        ("ADZ", False),  # Z is not in the box
        ("ZZZZ", False),
        ("", False),
    ],
)
def test_can_make_word(board, word, expected):
    assert board.can_make_word(word) is expected


def test_absent_letter_always_rejected(board):
    for word in ["ADGX", "XADG", "ADXG", "QADGJBEHKCFIL"]:
        assert not board.can_make_word(word)
