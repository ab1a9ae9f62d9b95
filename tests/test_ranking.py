import math

import pytest

from search_server.document import Document
from search_server.ranking import inverse_document_freq, rank_documents


def test_idf_natural_log():
    assert inverse_document_freq(3, 2) == pytest.approx(math.log(1.5))
    assert inverse_document_freq(4, 4) == 0.0


def test_idf_undefined_for_absent_term():
    with pytest.raises(ValueError):
        inverse_document_freq(3, 0)


def test_rank_by_relevance_then_rating():
    documents = [
        Document(1, 0.5, 1),
        Document(2, 0.9, 0),
        Document(3, 0.5 + 1e-7, 7),
        Document(4, 0.1, 100),
    ]
    ranked = rank_documents(documents, max_results=5, epsilon=1e-6)
    assert [d.id for d in ranked] == [2, 3, 1, 4]


def test_rank_truncates():
    documents = [Document(i, float(i), 0) for i in range(8)]
    ranked = rank_documents(documents, max_results=5, epsilon=1e-6)
    assert [d.id for d in ranked] == [7, 6, 5, 4, 3]


def test_rank_empty():
    assert rank_documents([], max_results=5, epsilon=1e-6) == []
