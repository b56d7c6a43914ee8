"""
Index builder: loads people records and constructs the in-memory inverted index.
Records come either from a text file (one person per line) or from the console.
"""

import logging
from pathlib import Path
from typing import Protocol, Sequence

from .posting import InvertedIndex
from .tokenizer import read_text_file, split_lines

logger = logging.getLogger(__name__)

COUNT_PROMPT = "Enter the number of people:"
PEOPLE_PROMPT = "Enter all people:"


class RecordSource(Protocol):
    def populate(self) -> list[str]:
        ...


class FileSource:
    """
    Records from a text file, one record per line.
    Blank lines are kept so record positions match line numbers.
    """

    def __init__(self, filepath: Path) -> None:
        self.filepath = Path(filepath)

    def populate(self) -> list[str]:
        if not self.filepath.exists():
            raise FileNotFoundError(f"Data file not found: {self.filepath}")
        records = split_lines(read_text_file(self.filepath))
        logger.info("Read %d records from %s", len(records), self.filepath)
        return records


class ConsoleSource:
    """
    Records typed at the console: a count N, then N lines.
    """

    def populate(self) -> list[str]:
        print(COUNT_PROMPT)
        raw_count = input().strip()
        try:
            count = int(raw_count)
        except ValueError:
            raise ValueError(f"Number of people must be an integer, got {raw_count!r}") from None
        if count < 0:
            raise ValueError(f"Number of people must not be negative, got {count}")
        print(PEOPLE_PROMPT)
        return [input() for _ in range(count)]


def build_index(records: Sequence[str]) -> InvertedIndex:
    """
    Build the inverted index over all records (single in-memory pass).
    """
    index = InvertedIndex(records)
    logger.info(
        "Indexed %d records (%d unique tokens)", index.record_count, len(index)
    )
    return index


def build_index_from_source(source: RecordSource) -> InvertedIndex:
    return build_index(source.populate())
