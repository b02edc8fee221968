"""Shared exception classes for the word frequency tools."""

from __future__ import annotations

from typing import Optional


class WordFreqError(Exception):
    """Base exception for all word frequency errors."""

    pass


class LineDecodeError(WordFreqError):
    """A single input line could not be decoded."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        super().__init__(message)
        self.line_number = line_number


class InputOpenError(WordFreqError):
    """The input source could not be opened."""

    pass
