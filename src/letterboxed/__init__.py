"""Letter Boxed Puzzle Solver.

Finds every chain of dictionary words that solves a Letter Boxed puzzle: each word is typed
without using two letters from the same wall in a row, each word starts with the last letter of
the previous one, and together the words use every letter of the box.  The search is exhaustive
and runs one branch per starting letter in parallel.

Any puzzle parameter not given on the command line is prompted for interactively.
"""

import argparse
from sys import exit

from .board import NUM_WALLS
from .puzzle_config import PuzzleConfig, clean, load_configs, max_words, validate_letters
from .solver.config import config as solver_config
from .solver.solver import run, write_solutions
from .wordlist import file_exists


def get_dictionary_name_from_user(default: str) -> str:
    """Prompt for a dictionary file, re-prompting until the file exists.

    An empty answer selects `default`.
    """
    path = input(
        f"Enter the filename of the dictionary you want to use (hit enter for \"{default}\"): "
    )
    while path and not file_exists(path):
        path = input(f'File "{path}" does not exist. Please try again: ')
    return path or default


def get_letters_from_user() -> str:
    """Prompt for the letters of the box, wall by wall."""
    letters = clean(input("Enter each letter such that entire walls are typed in consecutively: "))
    while True:
        try:
            validate_letters(letters)
            return letters
        except ValueError:
            letters = clean(input(f"Please enter a multiple of {NUM_WALLS} letters (A-Z): "))


def get_num_words_from_user(letters: str) -> int:
    """Prompt for the number of words per solution, re-prompting until it is in range."""
    min_words, most_words = 1, max_words(letters)
    answer = input("Please enter the number of words you want in your solution: ")
    while True:
        try:
            n_words = int(answer)
            if min_words <= n_words <= most_words:
                return n_words
        except ValueError:
            pass
        answer = input(f"Please enter a number between {min_words} and {most_words}: ")


def get_output_filename_from_user(n_solutions: int) -> str | None:
    """Ask whether to save the solutions, and if so, where."""
    answer = input(
        f"{n_solutions} solution(s) found! Would you like to save them to a file? (y/n): "
    )
    if not answer.strip().lower().startswith("y"):
        print("Alright, goodbye!")
        return None
    return input("Enter the output filename: ").strip() or None


def main() -> None:
    """Main entry point for the Letter Boxed solver."""
    parser = argparse.ArgumentParser(description="Find every solution to a Letter Boxed puzzle")
    parser.add_argument(
        "puzzles",
        nargs="?",
        help="Optional puzzle file, one 'LETTERS N_WORDS' puzzle per line",
    )
    parser.add_argument("--dict", dest="word_list_path", help="Dictionary file, one word per line")
    parser.add_argument("--letters", help="Letters of the box, typed wall by wall")
    parser.add_argument("--words", type=int, dest="n_words", help="Number of words per solution")
    parser.add_argument("--output", help="File to write the solutions to")
    parser.add_argument(
        "--executor",
        choices=["thread", "process"],
        help=f"Worker pool kind (default from config: {solver_config.executor})",
    )
    args = parser.parse_args()

    interactive = args.puzzles is None and args.letters is None

    word_list_path = args.word_list_path
    if word_list_path is None and interactive:
        word_list_path = get_dictionary_name_from_user(solver_config.word_list_path)
    word_list_path = word_list_path or solver_config.word_list_path
    if not file_exists(word_list_path):
        print(f'Dictionary file "{word_list_path}" does not exist.')
        exit(1)

    if args.puzzles is not None:
        try:
            configs = load_configs(args.puzzles)
        except (OSError, ValueError) as e:
            print(f"Could not load puzzles: {e}")
            exit(1)
        for config in configs:
            run(config, word_list_path=word_list_path, kind=args.executor)
        return

    if args.letters is not None:
        letters = clean(args.letters)
        try:
            validate_letters(letters)
        except ValueError as e:
            print(f"Invalid puzzle: {e}")
            exit(1)
    else:
        letters = get_letters_from_user()
    n_words = args.n_words if args.n_words is not None else get_num_words_from_user(letters)
    try:
        config = PuzzleConfig(letters=letters, n_words=n_words)
    except ValueError as e:
        print(f"Invalid puzzle: {e}")
        exit(1)

    if n_words > 2:
        print(
            "Please be patient, finding all solutions can take a few minutes for more than "
            "2 words."
        )
    solutions = run(
        config, word_list_path=word_list_path, output_path=args.output, kind=args.executor
    )

    if args.output is None and interactive:
        output_path = get_output_filename_from_user(len(solutions))
        if output_path is not None:
            write_solutions(output_path, solutions)
            print(f"Solutions written to {output_path}")

    print("Have a nice day!")

