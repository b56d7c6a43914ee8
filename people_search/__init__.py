"""People search index package."""

from .errors import PeopleSearchError, InvalidStrategyError
from .posting import InvertedIndex
from .index_builder import build_index, FileSource, ConsoleSource
from .search import SearchService, Strategy, evaluate, find_matches
from .tokenizer import tokenize
