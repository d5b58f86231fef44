"""Allow running the solver with `python -m letterboxed`."""

from letterboxed import main

if __name__ == "__main__":
    main()
