"""
Request history over a search server.

Keeps the most recent requests (one per minute of a day by default) and how
many of them returned nothing. Eviction is count based: once the window is
full, each new request pushes the oldest one out.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from loguru import logger

from .config import get_settings
from .document import Document, DocumentPredicate, DocumentStatus
from .exceptions import InvalidArgument
from .search_server import SearchServer


@dataclass
class QueryResult:
    raw_query: str
    result: list[Document] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.result


class RequestQueue:
    """
    Wraps a SearchServer; the server must stay alive as long as the queue.
    The queue only reads from it.
    """

    def __init__(self, search_server: SearchServer, *, window: int | None = None) -> None:
        self._search_server = search_server
        self.window = window if window is not None else get_settings().request_window
        if self.window < 1:
            raise InvalidArgument(f"incorrect request window: {self.window}")
        self._requests: deque[QueryResult] = deque()
        self._no_result_requests = 0
        self._result_requests = 0

    def add_find_request(
        self,
        raw_query: str,
        predicate_or_status: DocumentPredicate | DocumentStatus = DocumentStatus.ACTUAL,
    ) -> list[Document]:
        result = self._search_server.find_top_documents(raw_query, predicate_or_status)

        # Stored results are a copy of what the caller gets.
        request = QueryResult(raw_query=raw_query, result=list(result))
        self._requests.append(request)
        if request.is_empty:
            self._no_result_requests += 1
        else:
            self._result_requests += 1

        while len(self._requests) > self.window:
            evicted = self._requests.popleft()
            if evicted.is_empty:
                self._no_result_requests -= 1
            else:
                self._result_requests -= 1
            logger.debug(f"Evicted request {evicted.raw_query!r} from history")

        return result

    def get_no_result_requests(self) -> int:
        return self._no_result_requests

    def get_result_requests(self) -> int:
        return self._result_requests

    def __len__(self) -> int:
        return len(self._requests)
