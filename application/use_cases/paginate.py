"""Use case that splits search results into fixed-size pages."""
from __future__ import annotations

from typing import Generic, Iterator, Sequence, TypeVar, overload

T = TypeVar("T")


class Page(Generic[T]):
    """A contiguous slice of the paginated sequence."""

    def __init__(self, items: Sequence[T], start: int, stop: int) -> None:
        self._items = items
        self.start = start
        self.stop = stop

    def __iter__(self) -> Iterator[T]:
        for position in range(self.start, self.stop):
            yield self._items[position]

    def __len__(self) -> int:
        return self.stop - self.start

    def __str__(self) -> str:
        return "".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"Page(start={self.start}, stop={self.stop})"


class Paginator(Generic[T]):
    """Pages of ``page_size`` items; the last page may be shorter."""

    def __init__(self, items: Sequence[T], page_size: int) -> None:
        if page_size < 1:
            raise ValueError("page_size must be positive")
        self.page_size = page_size
        self._pages = [
            Page(items, start, min(start + page_size, len(items)))
            for start in range(0, len(items), page_size)
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


def paginate(items: Sequence[T], page_size: int) -> Paginator[T]:
    """Split ``items`` into consecutive pages of ``page_size``."""

    return Paginator(items, page_size)


__all__ = ["Page", "Paginator", "paginate"]
