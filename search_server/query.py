"""
Query parsing for plus/minus word queries.

Grammar, per space-delimited token:
    word      plus word, the document should contain it
    -word     minus word, documents containing it are excluded
Stop words are dropped from both sets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet

from .exceptions import InvalidArgument
from .tokenizer import is_valid_word, split_into_words


@dataclass(frozen=True)
class QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


@dataclass(frozen=True)
class Query:
    plus_words: frozenset[str] = frozenset()
    minus_words: frozenset[str] = frozenset()

    def sorted_plus_words(self) -> list[str]:
        return sorted(self.plus_words)


def parse_query_word(token: str, stop_words: AbstractSet[str]) -> QueryWord:
    """
    Classify a single query token. Raises InvalidArgument on malformed tokens.
    """
    if token == "-":
        raise InvalidArgument("invalid query (minus without word)")
    if "--" in token:
        raise InvalidArgument(f"invalid query (double minus): {token!r}")
    if token.endswith("-"):
        raise InvalidArgument(f"invalid query (minus at word end): {token!r}")

    is_minus = token.startswith("-")
    word = token[1:] if is_minus else token
    if not word:
        raise InvalidArgument("query word not found")
    if not is_valid_word(word):
        raise InvalidArgument(f"query word with special characters: {word!r}")

    return QueryWord(data=word, is_minus=is_minus, is_stop=word in stop_words)


def parse_query(text: str, stop_words: AbstractSet[str]) -> Query:
    """Parse a raw query into plus and minus word sets."""
    plus_words: set[str] = set()
    minus_words: set[str] = set()
    for token in split_into_words(text):
        query_word = parse_query_word(token, stop_words)
        if query_word.is_stop:
            continue
        if query_word.is_minus:
            minus_words.add(query_word.data)
        else:
            plus_words.add(query_word.data)
    return Query(plus_words=frozenset(plus_words), minus_words=frozenset(minus_words))
