"""
TF-IDF scoring and result ordering.

relevance(d) = sum over plus words t present in d of tf(t, d) * idf(t)
idf(t)       = ln(N / df(t))
"""

from __future__ import annotations

import math
from functools import cmp_to_key
from typing import Iterable

from .document import Document


def inverse_document_freq(document_count: int, document_frequency: int) -> float:
    """
    Natural-log IDF. Only defined for terms present in at least one document.
    """
    if document_frequency <= 0:
        raise ValueError("IDF is undefined for a term absent from the index")
    return math.log(document_count / document_frequency)


def _compare_documents(lhs: Document, rhs: Document, epsilon: float) -> int:
    # Relevances within epsilon are equal, rating decides.
    if abs(lhs.relevance - rhs.relevance) < epsilon:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


def rank_documents(
    documents: Iterable[Document],
    *,
    max_results: int,
    epsilon: float,
) -> list[Document]:
    """
    Sort by descending relevance, then descending rating, and keep the top results.
    Input order breaks any remaining ties.
    """
    key = cmp_to_key(lambda lhs, rhs: _compare_documents(lhs, rhs, epsilon))
    ranked = sorted(documents, key=key)
    return ranked[:max_results]
