"""
Posting and inverted index data structures.

A posting represents a term's occurrence in a document:
document id and term frequency (occurrences / indexable words in the document).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Posting:
    """
    Represents a term's occurrence in a document.
    - doc_id: document identifier
    - tf: term frequency, a share of the document's indexable words
    """

    doc_id: int
    tf: float

    def __repr__(self) -> str:
        return f"Posting(doc_id={self.doc_id!r}, tf={self.tf})"


class InvertedIndex:
    """
    Inverted index: map from term -> {doc_id: tf}.
    Postings only grow; there is no removal.
    """

    def __init__(self) -> None:
        self._index: dict[str, dict[int, float]] = {}

    def add_posting(self, term: str, doc_id: int, tf: float) -> None:
        """Add tf to the term's posting for doc_id, creating it if needed."""
        postings = self._index.setdefault(term, {})
        postings[doc_id] = postings.get(doc_id, 0.0) + tf

    def get_postings(self, term: str) -> list[Posting]:
        """Return the postings for a term ordered by doc_id, or an empty list."""
        postings = self._index.get(term, {})
        return [Posting(doc_id=doc_id, tf=tf) for doc_id, tf in sorted(postings.items())]

    def has_posting(self, term: str, doc_id: int) -> bool:
        """True if the term occurs in the document. Unknown terms have no postings."""
        return doc_id in self._index.get(term, {})

    def document_frequency(self, term: str) -> int:
        """Number of documents containing the term."""
        return len(self._index.get(term, {}))

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, term: str) -> bool:
        return term in self._index
