"""Shared pytest fixtures for word frequency tests."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def sample_text_file(tmp_path: Path) -> Path:
    """Create a sample text file for testing.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        Path to sample text file
    """
    file_path = tmp_path / "sample.txt"
    file_path.write_text(
        "The cat sat on the mat.\nI don't think the cat's 'happy'.\n",
        encoding="utf-8",
    )
    return file_path


@pytest.fixture
def byte_stream() -> Callable[[str], io.BytesIO]:
    """Return a factory turning text into a UTF-8 byte stream."""

    def _make(text: str) -> io.BytesIO:
        return io.BytesIO(text.encode("utf-8"))

    return _make


class FailingStream:
    """Binary stream that yields some lines and then raises OSError."""

    def __init__(self, lines: list[bytes]) -> None:
        self._lines = lines

    def __iter__(self):
        yield from self._lines
        raise OSError("device not ready")


@pytest.fixture
def failing_stream() -> Callable[[list[bytes]], FailingStream]:
    return FailingStream
