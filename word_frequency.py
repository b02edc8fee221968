"""Word frequency counter with CLI.

Reads text line by line, extracts words with the apostrophe-aware rules in
`text_nlp.word_tokenizer`, and prints "word: count" lines ordered by count
descending, ties alphabetical.

Examples:
  - Count words piped via stdin:
    cat book.txt | python word_frequency.py

  - Ten most frequent words of a file, as JSON:
    python word_frequency.py --file book.txt --top 10 --json
"""

from __future__ import annotations

import argparse
import codecs
import io
import logging
import sys
from pathlib import Path
from typing import IO, List, Optional

from common.cli_helpers import (
    add_json_output_argument,
    add_log_level_argument,
    open_input,
    setup_logging,
)
from common.exceptions import InputOpenError
from files.line_reader import iter_lines
from text_nlp.frequency_table import (
    FrequencyTable,
    WordCount,
    report_as_json,
    sort_frequencies,
    write_report,
)
from text_nlp.word_tokenizer import iter_words

logger = logging.getLogger(__name__)


def count_words_in_stream(
    stream: IO[bytes],
    table: Optional[FrequencyTable] = None,
    encoding: str = "utf-8",
) -> FrequencyTable:
    """Count every word of a binary stream into `table` (new if omitted)."""
    if table is None:
        table = FrequencyTable()
    lines = 0
    for line in iter_lines(stream, encoding=encoding):
        lines += 1
        for word in iter_words(line):
            table.increment(word)
    logger.info(f"Read {lines} line(s), {len(table)} distinct word(s)")
    return table


def count_words_in_text(text: str) -> FrequencyTable:
    return count_words_in_stream(io.BytesIO(text.encode("utf-8")))


def build_report(table: FrequencyTable, top: Optional[int] = None) -> List[WordCount]:
    ranked = sort_frequencies(table.snapshot())
    return ranked[:top] if top is not None else ranked


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return number


def _encoding(value: str) -> str:
    try:
        name = codecs.lookup(value).name
        newline = "\n".encode(name)
    except LookupError:
        raise argparse.ArgumentTypeError(f"unknown encoding: {value}")
    # Lines are split on the raw newline byte before decoding.
    if newline != b"\n":
        raise argparse.ArgumentTypeError(
            f"unsupported encoding: {value} (newline is not a single byte)"
        )
    return name


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Count word frequencies in text.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--file", type=Path, help="Path to a text file ('-' for stdin)"
    )
    parser.add_argument(
        "--encoding", type=_encoding, default="utf-8", help="Input text encoding"
    )
    parser.add_argument(
        "--top", type=_positive_int, help="Only print the N most frequent words"
    )
    add_json_output_argument(parser)
    add_log_level_argument(parser, default="WARNING")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.log_level)

    try:
        stream = open_input(args.file)
    except InputOpenError as ex:
        logger.error(str(ex))
        return 2

    try:
        table = count_words_in_stream(stream, encoding=args.encoding)
    finally:
        if stream is not sys.stdin.buffer:
            stream.close()

    report = build_report(table, top=args.top)
    if args.json:
        print(report_as_json(report))
    else:
        write_report(report, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
