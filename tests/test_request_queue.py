import pytest

from search_server import DocumentStatus, InvalidArgument, RequestQueue, SearchServer


@pytest.fixture
def server():
    server = SearchServer("and in at")
    server.add_document(1, "curly cat curly tail", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "curly dog and fancy collar", DocumentStatus.ACTUAL, [1, 2, 3])
    server.add_document(3, "big cat fancy collar ", DocumentStatus.ACTUAL, [1, 2, 8])
    server.add_document(4, "big dog sparrow Eugene", DocumentStatus.ACTUAL, [1, 3, 2])
    server.add_document(5, "big dog sparrow Vasiliy", DocumentStatus.ACTUAL, [1, 1, 1])
    return server


def test_window_evicts_oldest(server):
    queue = RequestQueue(server)
    for _ in range(1440):
        queue.add_find_request("empty request")
    assert queue.get_no_result_requests() == 1440

    queue.add_find_request("curly dog")
    assert queue.get_no_result_requests() == 1439
    assert len(queue) == 1440


def test_day_of_requests(server):
    queue = RequestQueue(server)
    for _ in range(1439):
        queue.add_find_request("empty request")
    queue.add_find_request("curly dog")
    queue.add_find_request("big collar")
    queue.add_find_request("sparrow")
    assert queue.get_no_result_requests() == 1437
    assert queue.get_result_requests() == 3


def test_results_are_returned(server):
    queue = RequestQueue(server)
    documents = queue.add_find_request("curly dog")
    assert documents == server.find_top_documents("curly dog")
    assert queue.get_no_result_requests() == 0


def test_call_shapes(server):
    queue = RequestQueue(server)
    assert queue.add_find_request("cat", DocumentStatus.BANNED) == []
    assert queue.add_find_request("cat", lambda document_id, status, rating: rating > 4)
    assert queue.add_find_request("cat")
    assert queue.get_no_result_requests() == 1
    assert queue.get_result_requests() == 2


def test_custom_window(server):
    queue = RequestQueue(server, window=2)
    queue.add_find_request("nothing")
    queue.add_find_request("nothing")
    queue.add_find_request("cat")
    assert queue.get_no_result_requests() == 1
    queue.add_find_request("cat")
    assert queue.get_no_result_requests() == 0
    assert len(queue) == 2


def test_invalid_query_is_not_recorded(server):
    queue = RequestQueue(server)
    with pytest.raises(InvalidArgument):
        queue.add_find_request("--cat")
    assert len(queue) == 0
    assert queue.get_no_result_requests() == 0


def test_caller_mutation_does_not_skew_counters(server):
    queue = RequestQueue(server, window=1)
    documents = queue.add_find_request("cat")
    documents.clear()
    queue.add_find_request("cat")
    assert queue.get_no_result_requests() == 0
    assert queue.get_result_requests() == 1


@pytest.mark.parametrize("window", [0, -1])
def test_invalid_window(server, window):
    with pytest.raises(InvalidArgument):
        RequestQueue(server, window=window)
