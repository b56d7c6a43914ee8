"""Exceptions raised by the people search package."""


class PeopleSearchError(Exception):
    """Base class for people search errors."""


class InvalidStrategyError(PeopleSearchError, ValueError):
    """Raised when a matching strategy selector is not ALL, ANY or NONE."""
