"""
Logging utilities for the twosat package.

This module configures Python's built-in logging for the package and provides a
ResultLogger that records solver results as JSON lines, one object per
(input file, solver) run.
"""

import json
import logging
import os
import time
from datetime import datetime
from typing import Any

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int | str = logging.INFO,
    log_file: str | None = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Configure the package logger with a console handler and an optional file handler.

    Args:
        level: Logging level (name or number)
        log_file: Optional path of a log file; it receives DEBUG and above
        fmt: Format string for both handlers

    Returns:
        The configured "twosat" logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level}")

    logger = logging.getLogger("twosat")
    logger.setLevel(min(level, logging.DEBUG) if log_file else level)
    logger.propagate = False

    # Remove any existing handlers
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(fmt)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        directory = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(directory, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


class ResultLogger:
    """
    A logger for solver results in JSON Lines format.

    Records are appended, so several batch runs can share one results file.
    """

    def __init__(self, file_path: str, run_name: str | None = None):
        """
        Initialize the result logger.

        Args:
            file_path: Path of the JSON Lines file to append to
            run_name: Name stored in every record (defaults to a timestamp)
        """
        self.file_path = file_path
        self.run_name = run_name or datetime.now().isoformat()
        self.write_count = 0

        directory = os.path.dirname(os.path.abspath(file_path))
        os.makedirs(directory, exist_ok=True)
        self._file = open(file_path, "a")

    def _write_event(self, data: dict[str, Any]) -> None:
        data = {"run": self.run_name, "timestamp": time.time(), **data}
        self._file.write(json.dumps(data, default=str) + "\n")
        self._file.flush()
        self.write_count += 1

    def log_result(self, file_name: str, solver_name: str, result) -> None:
        """
        Log the result of one solver run.

        Args:
            file_name: Input file the solver ran on
            solver_name: Registered name of the solver
            result: SolverResult returned by the solver
        """
        self._write_event(
            {"file": file_name, "solver": solver_name, **result.to_dict()}
        )

    def log_error(self, file_name: str, exception: BaseException) -> None:
        """
        Log an input that could not be solved.

        Args:
            file_name: Input file that failed
            exception: The exception raised while reading it
        """
        self._write_event(
            {
                "file": file_name,
                "status": "error",
                "exception_type": type(exception).__name__,
                "error_message": str(exception),
            }
        )

    def close(self) -> None:
        """Close the underlying file."""
        if not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
