"""
Search component: matching strategies over the inverted index.

Strategies:
- ALL:  records containing every recognized query token (intersection).
- ANY:  records containing at least one recognized query token (union).
- NONE: records containing none of the query tokens (complement of ANY).

Query tokens with no postings are dropped before matching. An ALL query with one
known and one unknown token therefore matches on the known token alone.
"""

from __future__ import annotations

import enum
import logging
from typing import List, Sequence

from .errors import InvalidStrategyError
from .index_builder import build_index
from .posting import InvertedIndex
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class Strategy(enum.Enum):
    ALL = "ALL"
    ANY = "ANY"
    NONE = "NONE"

    @classmethod
    def parse(cls, name: str) -> "Strategy":
        """Convert user text such as 'any' or ' ALL ' to a Strategy."""
        try:
            return cls[name.strip().upper()]
        except (KeyError, AttributeError):
            raise InvalidStrategyError(
                f"Unknown strategy {name!r}; expected one of "
                + ", ".join(s.name for s in cls)
            ) from None


def _unique(postings: Sequence[int]) -> List[int]:
    """Drop repeated record ids, keeping first occurrences in order."""
    return list(dict.fromkeys(postings))


def find_matches(tokens: Sequence[str], index: InvertedIndex) -> List[List[int]]:
    """
    Look up the postings of each query token, in query order.
    Tokens missing from the index contribute nothing.
    """
    matches: List[List[int]] = []
    for token in tokens:
        postings = index.get_postings(token)
        if not postings:
            logger.debug("Dropping unknown query token %r", token)
            continue
        matches.append(_unique(postings))
    return matches


def intersect_postings(postings_lists: List[List[int]]) -> List[int]:
    """
    Intersect postings lists left to right.
    Order follows the first list's surviving record ids.
    """
    if not postings_lists:
        return []
    result = postings_lists[0]
    for other in postings_lists[1:]:
        keep = set(other)
        result = [record_id for record_id in result if record_id in keep]
        if not result:
            break
    return result


def union_postings(postings_lists: List[List[int]]) -> List[int]:
    """Union of postings lists left to right, without duplicates."""
    merged: dict[int, None] = {}
    for postings in postings_lists:
        merged.update(dict.fromkeys(postings))
    return list(merged)


def complement_postings(postings: Sequence[int], record_count: int) -> List[int]:
    """Record ids in [0, record_count) not present in postings, ascending."""
    excluded = set(postings)
    return [record_id for record_id in range(record_count) if record_id not in excluded]


def evaluate(
    strategy: Strategy,
    tokens: Sequence[str],
    index: InvertedIndex,
    record_count: int,
) -> List[int]:
    """
    Compute the matching record ids for a tokenized query.
    Pure function of its arguments.
    """
    if strategy is Strategy.ALL:
        return intersect_postings(find_matches(tokens, index))
    if strategy is Strategy.ANY:
        return union_postings(find_matches(tokens, index))
    if strategy is Strategy.NONE:
        any_matches = union_postings(find_matches(tokens, index))
        return complement_postings(any_matches, record_count)
    raise InvalidStrategyError(f"Unsupported strategy: {strategy!r}")


class SearchService:
    """
    Tokenizes queries, runs the selected strategy and maps record ids back to text.
    """

    def __init__(self, index: InvertedIndex) -> None:
        self.index = index

    @classmethod
    def from_records(cls, records: Sequence[str]) -> "SearchService":
        return cls(build_index(records))

    @property
    def records(self) -> tuple[str, ...]:
        return self.index.records

    def find(self, query: str, strategy: Strategy | str) -> List[str]:
        if isinstance(strategy, str):
            strategy = Strategy.parse(strategy)
        elif not isinstance(strategy, Strategy):
            raise InvalidStrategyError(f"Unsupported strategy: {strategy!r}")
        tokens = tokenize(query)
        record_ids = evaluate(strategy, tokens, self.index, self.index.record_count)
        logger.debug(
            "Query %r with %s matched %d records", query, strategy.name, len(record_ids)
        )
        return [self.index.record(record_id) for record_id in record_ids]
