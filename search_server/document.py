"""
Document data structures.

A Document is one ranked search result: document id, accumulated relevance
and the document's average rating. DocumentData is what the index stores
per document at ingestion time.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable


class DocumentStatus(Enum):
    ACTUAL = 0
    IRRELEVANT = 1
    BANNED = 2
    REMOVED = 3


# (document_id, status, rating) -> keep document?
DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


@dataclass(frozen=True)
class DocumentData:
    rating: int
    status: DocumentStatus


@dataclass
class Document:
    """
    A ranked search result.
    - id: document identifier
    - relevance: sum of tf * idf over the matched plus words
    - rating: average rating of the document
    """

    id: int = 0
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return (
            f"{{ document_id = {self.id}, relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )


def compute_average_rating(ratings: Iterable[int]) -> int:
    """
    Integer mean of the ratings, truncated toward zero. 0 for no ratings.
    """
    ratings = list(ratings)
    if not ratings:
        return 0
    total = sum(ratings)
    average = abs(total) // len(ratings)
    return -average if total < 0 else average


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Build a predicate that keeps only documents with the given status."""

    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status

    return predicate


def format_match(words: Iterable[str], status: DocumentStatus) -> str:
    """Human-readable rendering of a match_document result."""
    return f"Matched words: {' '.join(words)}\nDocument Status: {status.name}"
