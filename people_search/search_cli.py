"""
Interactive people search.

Loads people records, builds the inverted index once, then runs a menu loop:
search with a matching strategy (ALL, ANY, NONE), print all people, or exit.

Usage (from repo root):
    python -m people_search.search_cli --data people.txt

Without --data the records are typed at the console: first the number of
people, then one person per line.
"""

from __future__ import annotations

import argparse
import enum
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import InvalidStrategyError
from .index_builder import ConsoleSource, FileSource, RecordSource, build_index_from_source
from .search import SearchService, Strategy

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"

NO_RESULTS_MESSAGE = "No matching people found."
QUERY_PROMPT = "Enter a name or email to search all suitable people."
INCORRECT_OPTION_MESSAGE = "Incorrect option! Try again."
INCORRECT_STRATEGY_MESSAGE = "Incorrect strategy! Try again."
FAREWELL_MESSAGE = "Bye!"


class Action(enum.Enum):
    SEARCH = (1, "Search information")
    SHOW_ALL = (2, "Print all data")
    EXIT = (0, "Exit")

    def __init__(self, code: int, label: str) -> None:
        self.code = code
        self.label = label

    def __str__(self) -> str:
        return f"{self.code}. {self.label}."

    @classmethod
    def from_code(cls, raw: str) -> Optional["Action"]:
        try:
            code = int(raw.strip())
        except ValueError:
            return None
        for action in cls:
            if action.code == code:
                return action
        return None


def print_menu() -> None:
    print("=== Menu ===")
    for action in Action:
        print(action)


def print_result(result: List[str]) -> None:
    if not result:
        print(NO_RESULTS_MESSAGE)
        return
    for person in result:
        print(person)


def print_all_people(service: SearchService) -> None:
    print("=== List of people ===")
    for person in service.records:
        print(person)


def ask_query(service: SearchService) -> None:
    print("Select a matching strategy: " + ", ".join(s.name for s in Strategy))
    raw_strategy = input()
    try:
        strategy = Strategy.parse(raw_strategy)
    except InvalidStrategyError as e:
        logger.debug("Rejected strategy: %s", e)
        print(INCORRECT_STRATEGY_MESSAGE)
        return
    print(QUERY_PROMPT)
    query = input()
    print_result(service.find(query, strategy))


def run_action(service: SearchService, action: Optional[Action]) -> bool:
    """
    Run one menu action. Returns False when the loop should stop.
    """
    if action is Action.SEARCH:
        ask_query(service)
    elif action is Action.SHOW_ALL:
        print_all_people(service)
    elif action is Action.EXIT:
        print(FAREWELL_MESSAGE)
        return False
    else:
        print(INCORRECT_OPTION_MESSAGE)
    return True


def run_search_loop(service: SearchService) -> None:
    """
    Interactive menu loop. EOF or Ctrl+C ends it like Exit.
    """
    while True:
        print_menu()
        try:
            raw_action = input()
            print()
            keep_going = run_action(service, Action.from_code(raw_action))
        except (EOFError, KeyboardInterrupt):
            print()
            print(FAREWELL_MESSAGE)
            break
        if not keep_going:
            break
        print()


def make_source(data_path: Optional[Path]) -> RecordSource:
    if data_path is None:
        return ConsoleSource()
    return FileSource(data_path)


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Search people by name or email.")
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Path to a text file with one person per line (default: read from console).",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        index = build_index_from_source(make_source(args.data))
    except KeyboardInterrupt:
        print()
        print(FAREWELL_MESSAGE)
        return 1
    except (OSError, ValueError, EOFError) as e:
        print(f"Error: {e}")
        return 1

    run_search_loop(SearchService(index))
    return 0


if __name__ == "__main__":
    sys.exit(main())
