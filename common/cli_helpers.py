"""Shared CLI utilities for consistent argument parsing."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import IO, Optional

from common.exceptions import InputOpenError


def add_log_level_argument(
    parser: argparse.ArgumentParser, default: str = "INFO"
) -> None:
    """Add standard --log-level argument.

    Args:
        parser: ArgumentParser to add the argument to
        default: Level used when the flag is omitted
    """
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default=default,
        help="Logging verbosity",
    )


def setup_logging(level: str) -> None:
    """Configure logging with consistent format.

    Records go to stderr so stdout stays reserved for results.

    Args:
        level: Logging level (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def open_input(
    file_path: Optional[Path] = None, stdin_marker: str = "-"
) -> IO[bytes]:
    """Open a binary input stream from a file or stdin.

    Args:
        file_path: Path to file, None or stdin_marker for stdin
        stdin_marker: String that indicates stdin should be used (default: "-")

    Returns:
        Binary stream. Callers close it unless it is stdin.

    Raises:
        InputOpenError: If the file cannot be opened
    """
    if file_path is None or str(file_path) == stdin_marker:
        return sys.stdin.buffer

    try:
        return Path(file_path).open("rb")
    except OSError as ex:
        raise InputOpenError(f"Failed to open '{file_path}': {ex}") from ex


def add_json_output_argument(parser: argparse.ArgumentParser) -> None:
    """Add standard --json output flag.

    Args:
        parser: ArgumentParser to add the argument to
    """
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )
