"""
Pagination of ordered sequences into fixed-size pages.
"""

from __future__ import annotations

from typing import Generic, Iterator, Sequence, TypeVar, overload

from .exceptions import InvalidArgument

T = TypeVar("T")


class Page(Generic[T]):
    """A contiguous window of a sequence."""

    def __init__(self, items: Sequence[T]) -> None:
        self._items = items

    @property
    def size(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"Page({list(self._items)!r})"


class Paginator(Generic[T]):
    """
    Splits a sequence into pages of page_size items; the last page may be
    shorter. An empty sequence has no pages.
    """

    def __init__(self, items: Sequence[T], page_size: int) -> None:
        if page_size <= 0:
            raise InvalidArgument(f"incorrect page size: {page_size}")
        self.page_size = page_size
        self._pages: list[Page[T]] = [
            Page(items[start:start + page_size]) for start in range(0, len(items), page_size)
        ]

    def __iter__(self) -> Iterator[Page[T]]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    @overload
    def __getitem__(self, index: int) -> Page[T]: ...

    @overload
    def __getitem__(self, index: slice) -> list[Page[T]]: ...

    def __getitem__(self, index):
        return self._pages[index]

    def __str__(self) -> str:
        return "".join(str(page) for page in self._pages)


def paginate(items: Sequence[T], page_size: int) -> Paginator[T]:
    return Paginator(items, page_size)
