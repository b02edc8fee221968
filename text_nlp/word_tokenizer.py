"""Word tokenizer with apostrophe-aware cleaning rules.

A line is split into candidates on every character that is neither a letter
nor an apostrophe, so digits and punctuation only ever separate words. Each
candidate is then cleaned:

- One-letter candidates count only when they are "a" or "i".
- An apostrophe may appear at the first, second-to-last or last position.
  First and last ones are stripped; second-to-last is kept (don't, o'er).
  An apostrophe anywhere else rejects the candidate.

Accepted words are lowercased.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


APOSTROPHE = "'"
SINGLE_LETTER_WORDS = {"a", "i"}


def is_boundary(ch: str) -> bool:
    return not ch.isalpha() and ch != APOSTROPHE


def split_candidates(line: str) -> List[str]:
    """Split `line` on boundary characters, dropping empty pieces."""
    candidates: List[str] = []
    current: List[str] = []
    for ch in line:
        if is_boundary(ch):
            if current:
                candidates.append("".join(current))
                current.clear()
        else:
            current.append(ch)
    if current:
        candidates.append("".join(current))
    return candidates


def scan_apostrophes(candidate: str) -> Optional[Tuple[bool, bool]]:
    """Classify apostrophe positions in a candidate of two or more characters.

    Returns:
        ``(leading, trailing)`` flags, or None if an apostrophe sits anywhere
        other than the first, second-to-last or last position.
    """
    last = len(candidate) - 1
    leading = False
    trailing = False
    for pos, ch in enumerate(candidate):
        if ch != APOSTROPHE:
            continue
        if pos == 0:
            leading = True
        elif pos == last - 1:
            continue
        elif pos == last:
            trailing = True
        else:
            return None
    return leading, trailing


def clean_word(candidate: str) -> Optional[str]:
    """Return the cleaned form of `candidate`, or None if it is not a word.

    Case is preserved; callers lowercase the result.
    """
    if not candidate:
        return None

    if len(candidate) == 1:
        return candidate if candidate.lower() in SINGLE_LETTER_WORDS else None

    flags = scan_apostrophes(candidate)
    if flags is None:
        return None
    leading, trailing = flags

    start = 1 if leading else 0
    end = len(candidate) - 1 if trailing else len(candidate)
    word = candidate[start:end]

    # Doubled edge apostrophes leave one behind; output words never start or
    # end with an apostrophe.
    if not word or word.startswith(APOSTROPHE) or word.endswith(APOSTROPHE):
        return None
    return word


def iter_words(line: str) -> Iterator[str]:
    """Yield the lowercase words of one line."""
    for candidate in split_candidates(line):
        word = clean_word(candidate)
        if word is None:
            logger.debug(f"Rejected candidate {candidate!r}")
            continue
        yield word.lower()


def tokenize(text: str) -> List[str]:
    """Return all words of `text`, line by line."""
    tokens: List[str] = []
    for line in text.splitlines():
        tokens.extend(iter_words(line))
    return tokens
