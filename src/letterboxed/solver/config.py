"""Letter Boxed solver configuration."""

from typing import Literal

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the Letter Boxed solver."""

    deterministic: bool = True
    """Whether to visit words in sorted order and sort the final solution list. Default: True."""

    executor: Literal["thread", "process"] = "thread"
    """Kind of worker pool used for the per-letter branches. Default: "thread"."""

    max_workers: int | None = None
    """Maximum number of workers. If None (default), uses one worker per starting letter."""

    word_list_path: str = "dictionary.txt"
    """Dictionary used when none is given on the command line."""

    log_dir: str = "logs"
    """Directory in which per-run log files are written. Default: "logs"."""

    validate_solutions: bool = True
    """Whether to re-check every solution against the puzzle rules after the search."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
