"""
In-memory search server: inverted index with TF-IDF ranking.

Documents are indexed by space-delimited words minus stop words. Queries
consist of plus words (scored) and minus words (exclude any document that
contains them). Results are filtered by a predicate over
(document_id, status, rating), ranked and truncated to the top results.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from loguru import logger

from .config import get_settings
from .document import (
    Document,
    DocumentData,
    DocumentPredicate,
    DocumentStatus,
    compute_average_rating,
    status_predicate,
)
from .exceptions import InvalidArgument, OutOfRange
from .posting import InvertedIndex
from .query import Query, parse_query
from .ranking import inverse_document_freq, rank_documents
from .tokenizer import is_malformed_hyphen_token, is_valid_word, split_into_words, split_stop_words


def _as_predicate(predicate_or_status: DocumentPredicate | DocumentStatus) -> DocumentPredicate:
    if isinstance(predicate_or_status, DocumentStatus):
        return status_predicate(predicate_or_status)
    if callable(predicate_or_status):
        return predicate_or_status
    raise TypeError(
        f"expected a DocumentStatus or a predicate, got {type(predicate_or_status).__name__}"
    )


class SearchServer:
    """
    Inverted index over short text documents.

    stop_words: a space-separated string or an iterable of words; copied.
    max_results / epsilon: override the configured result cap and the
    relevance tolerance used when ordering results.
    """

    def __init__(
        self,
        stop_words: str | Iterable[str] | None = None,
        *,
        max_results: int | None = None,
        epsilon: float | None = None,
    ) -> None:
        settings = get_settings()
        self.max_results = max_results if max_results is not None else settings.max_result_document_count
        self.epsilon = epsilon if epsilon is not None else settings.relevance_epsilon
        if self.max_results < 1:
            raise InvalidArgument(f"incorrect result limit: {self.max_results}")
        if self.epsilon <= 0:
            raise InvalidArgument(f"incorrect relevance epsilon: {self.epsilon}")

        words = split_stop_words(stop_words)
        for word in words:
            if not is_valid_word(word) or is_malformed_hyphen_token(word):
                raise InvalidArgument(f"invalid stop word: {word!r}")
        self._stop_words: frozenset[str] = frozenset(words)

        self._index = InvertedIndex()
        self._documents: dict[int, DocumentData] = {}
        self._document_ids: list[int] = []

    @property
    def stop_words(self) -> frozenset[str]:
        return self._stop_words

    def is_stop_word(self, word: str) -> bool:
        return word in self._stop_words

    def split_into_words_no_stop(self, text: str) -> list[str]:
        return [word for word in split_into_words(text) if not self.is_stop_word(word)]

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Iterable[int],
    ) -> None:
        """
        Index a document. Raises InvalidArgument on a negative or already used
        id, an unknown status, or when the text contains control characters.
        Nothing is indexed when validation fails.
        """
        if document_id < 0:
            raise InvalidArgument(f"invalid document id: {document_id}")
        if document_id in self._documents:
            raise InvalidArgument(f"document id is busy: {document_id}")
        if not isinstance(status, DocumentStatus):
            raise InvalidArgument(f"invalid document status: {status!r}")
        if not is_valid_word(document):
            raise InvalidArgument(f"document {document_id} contains special characters")

        rating = compute_average_rating(ratings)
        words = self.split_into_words_no_stop(document)
        if words:
            inv_word_count = 1.0 / len(words)
            for word in words:
                self._index.add_posting(word, document_id, inv_word_count)

        self._documents[document_id] = DocumentData(rating=rating, status=status)
        self._document_ids.append(document_id)
        logger.debug(
            f"Indexed document {document_id}: words={len(words)} rating={rating} status={status.name}"
        )

    def parse_query(self, raw_query: str) -> Query:
        query = parse_query(raw_query, self._stop_words)
        logger.debug(
            f"Parsed query {raw_query!r}: plus={query.sorted_plus_words()} minus={sorted(query.minus_words)}"
        )
        return query

    def find_top_documents(
        self,
        raw_query: str,
        predicate_or_status: DocumentPredicate | DocumentStatus = DocumentStatus.ACTUAL,
    ) -> list[Document]:
        """
        Return the best matching documents for the query.

        predicate_or_status is either a callable (document_id, status, rating) -> bool
        or a DocumentStatus to search for; ACTUAL documents by default.
        """
        predicate = _as_predicate(predicate_or_status)
        query = self.parse_query(raw_query)
        matched = self._find_all_documents(query, predicate)
        top = rank_documents(matched, max_results=self.max_results, epsilon=self.epsilon)
        logger.debug(f"Query {raw_query!r}: matched={len(matched)} returned={len(top)}")
        return top

    def _find_all_documents(self, query: Query, predicate: DocumentPredicate) -> list[Document]:
        document_to_relevance: dict[int, float] = {}

        for word in query.plus_words:
            if word not in self._index:
                continue
            idf = inverse_document_freq(len(self._documents), self._index.document_frequency(word))
            for posting in self._index.get_postings(word):
                data = self._documents[posting.doc_id]
                if predicate(posting.doc_id, data.status, data.rating):
                    document_to_relevance[posting.doc_id] = (
                        document_to_relevance.get(posting.doc_id, 0.0) + posting.tf * idf
                    )

        # Minus words exclude regardless of the predicate.
        for word in query.minus_words:
            for posting in self._index.get_postings(word):
                document_to_relevance.pop(posting.doc_id, None)

        return [
            Document(id=document_id, relevance=relevance, rating=self._documents[document_id].rating)
            for document_id, relevance in sorted(document_to_relevance.items())
        ]

    def get_document_count(self) -> int:
        return len(self._documents)

    def get_document_id(self, index: int) -> int:
        """Id of the document added at the given zero-based position."""
        if index < 0 or index >= len(self._document_ids):
            raise OutOfRange(f"document index out of range: {index}")
        return self._document_ids[index]

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        """
        Plus words of the query found in the document, in sorted order, and
        the document's status. Any minus word found in the document empties
        the word list.
        """
        if document_id < 0:
            raise InvalidArgument(f"invalid document id: {document_id}")
        query = self.parse_query(raw_query)
        data = self._documents.get(document_id)
        if data is None:
            raise OutOfRange(f"document not found: {document_id}")

        if any(self._index.has_posting(word, document_id) for word in query.minus_words):
            return [], data.status

        matched_words = [
            word for word in query.sorted_plus_words() if self._index.has_posting(word, document_id)
        ]
        return matched_words, data.status

    def __len__(self) -> int:
        return self.get_document_count()

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._document_ids))
