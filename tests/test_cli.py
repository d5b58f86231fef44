"""Tests for the command line front end."""

import sys

import pytest

from letterboxed import main
from letterboxed.solver.config import config as solver_config


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(solver_config, "log_dir", str(tmp_path / "logs"))


def feed_input(monkeypatch, answers):
    """Answer successive `input()` prompts from a list."""
    answers = iter(answers)
    prompts: list[str] = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        return next(answers)

    monkeypatch.setattr("builtins.input", fake_input)
    return prompts


def test_arguments_only(monkeypatch, word_file, tmp_path, capsys):
    output = tmp_path / "out.txt"
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "letterboxed",
            "--dict",
            str(word_file),
            "--letters",
            "abc def ghi jkl",
            "--words",
            "2",
            "--output",
            str(output),
        ],
    )
    main()
    assert output.read_text(encoding="utf-8").splitlines() == ["ADGJ JBEHKCFIL", "ADGJBEHK KCFIL"]
    assert "2 solution(s) found!" in capsys.readouterr().out


def test_interactive_session_reprompts(monkeypatch, word_file, tmp_path):
    output = tmp_path / "saved.txt"
    monkeypatch.setattr(sys, "argv", ["letterboxed"])
    prompts = feed_input(
        monkeypatch,
        [
            str(tmp_path / "missing.txt"),  # dictionary does not exist
            str(word_file),
            "abcdefghijk",  # not a multiple of 4
            "abcdefghijkl",
            "seven",  # not a number
            "9",  # out of range
            "2",
            "y",
            str(output),
        ],
    )
    main()
    assert any("does not exist" in p for p in prompts)
    assert any("multiple of 4" in p for p in prompts)
    assert any("between 1 and 4" in p for p in prompts)
    assert output.read_text(encoding="utf-8").splitlines() == ["ADGJ JBEHKCFIL", "ADGJBEHK KCFIL"]


def test_interactive_decline_save(monkeypatch, word_file, tmp_path, capsys):
    monkeypatch.setattr(sys, "argv", ["letterboxed", "--dict", str(word_file)])
    feed_input(monkeypatch, ["ABCDEFGHIJKL", "3", "n"])
    main()
    out = capsys.readouterr().out
    assert "Alright, goodbye!" in out
    assert "Have a nice day!" in out


def test_invalid_word_count_exits(monkeypatch, word_file):
    monkeypatch.setattr(
        sys,
        "argv",
        ["letterboxed", "--dict", str(word_file), "--letters", "ABCDEFGHIJKL", "--words", "7"],
    )
    with pytest.raises(SystemExit) as exc_info:
        main()
    assert exc_info.value.code == 1


def test_missing_dictionary_exits(monkeypatch, tmp_path):
    monkeypatch.setattr(
        sys,
        "argv",
        ["letterboxed", "--dict", str(tmp_path / "missing.txt"), "--letters", "ABCDEFGHIJKL"],
    )
    with pytest.raises(SystemExit) as exc_info:
        main()
    assert exc_info.value.code == 1


def test_puzzle_file(monkeypatch, word_file, tmp_path, capsys):
    puzzles = tmp_path / "puzzles.txt"
    puzzles.write_text("ABC DEF GHI JKL 2\nABCDEFGHIJKL 3\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["letterboxed", str(puzzles), "--dict", str(word_file)])
    main()
    out = capsys.readouterr().out
    assert out.count("2 solution(s) found!") == 2
    assert (tmp_path / "logs" / "ABCDEFGHIJKL-3.log").is_file()


@pytest.mark.parametrize("bad_letters", ["ébcdefghijkl", "aaaa"])
def test_interactive_letters_reprompt_until_valid(monkeypatch, word_file, bad_letters, capsys):
    monkeypatch.setattr(sys, "argv", ["letterboxed", "--dict", str(word_file)])
    prompts = feed_input(monkeypatch, [bad_letters, "abcdefghijkl", "2", "n"])
    main()
    assert any("(A-Z)" in p for p in prompts)
    assert not any("between 1 and 0" in p for p in prompts)
    assert "2 solution(s) found!" in capsys.readouterr().out


def test_invalid_letters_argument_exits_before_prompting(monkeypatch, word_file):
    monkeypatch.setattr(
        sys, "argv", ["letterboxed", "--dict", str(word_file), "--letters", "ABCDE"]
    )
    prompts = feed_input(monkeypatch, [])
    with pytest.raises(SystemExit) as exc_info:
        main()
    assert exc_info.value.code == 1
    assert prompts == []
