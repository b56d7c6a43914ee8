"""
Inverted index data structure.

Maps each token to its postings list: the indices of the records containing it,
in build order. An index is appended once per occurrence of the token in a record.
"""

from typing import Iterator, Sequence

from .tokenizer import tokenize


class InvertedIndex:
    """
    Inverted index over an ordered list of records.
    Built once at construction; read-only afterwards.
    """

    def __init__(self, records: Sequence[str]) -> None:
        self._records: tuple[str, ...] = tuple(records)
        self._index: dict[str, list[int]] = {}
        self._build()

    def _build(self) -> None:
        for record_id, record in enumerate(self._records):
            for token in tokenize(record):
                if token not in self._index:
                    self._index[token] = []
                self._index[token].append(record_id)

    def get_postings(self, token: str) -> list[int]:
        """Return a copy of the postings list for a token, or empty list."""
        return list(self._index.get(token, []))

    @property
    def records(self) -> tuple[str, ...]:
        return self._records

    @property
    def record_count(self) -> int:
        return len(self._records)

    def record(self, record_id: int) -> str:
        return self._records[record_id]

    def tokens(self) -> Iterator[str]:
        """Iterate over all tokens in the index."""
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, token: str) -> bool:
        return token in self._index

    def __repr__(self) -> str:
        return f"InvertedIndex(records={self.record_count}, tokens={len(self)})"
