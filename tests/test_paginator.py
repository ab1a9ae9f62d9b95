import pytest

from search_server import Document, InvalidArgument, paginate


def test_page_sizes():
    pages = paginate(list(range(7)), 3)
    assert [len(page) for page in pages] == [3, 3, 1]
    assert [page.size for page in pages] == [3, 3, 1]
    assert [list(page) for page in pages] == [[0, 1, 2], [3, 4, 5], [6]]


def test_exact_split():
    pages = paginate("abcdef", 2)
    assert len(pages) == 3
    assert [list(page) for page in pages] == [["a", "b"], ["c", "d"], ["e", "f"]]


def test_works_over_ranges_and_tuples():
    assert [list(page) for page in paginate(range(5), 4)] == [[0, 1, 2, 3], [4]]
    assert [list(page) for page in paginate((1, 2), 5)] == [[1, 2]]


def test_empty_sequence_has_no_pages():
    assert list(paginate([], 3)) == []


def test_indexing():
    pages = paginate([1, 2, 3, 4, 5], 2)
    assert list(pages[-1]) == [5]
    assert [list(page) for page in pages[:2]] == [[1, 2], [3, 4]]


@pytest.mark.parametrize("page_size", [0, -2])
def test_invalid_page_size(page_size):
    with pytest.raises(InvalidArgument):
        paginate([1, 2, 3], page_size)


def test_render_documents():
    documents = [Document(1, 0.5, 4), Document(2, 0.25, 1)]
    pages = paginate(documents, 1)
    assert str(pages[0]) == "{ document_id = 1, relevance = 0.5, rating = 4 }"
    assert str(pages) == str(documents[0]) + str(documents[1])
