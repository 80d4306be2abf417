"""Generic page-of-results container.

Used for both sides of the core: pages of UpstreamProduct coming from
the catalog and pages of StockView handed to the presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Page(Generic[T]):
    """A single zero-based page of items plus meta-data.

    ``last`` is the only field that may decide whether another page
    exists. ``total_pages`` is informational and may be stale or absent.
    """

    content: Sequence[T] = field(default_factory=tuple)
    page: int | None = None
    size: int | None = None
    total_elements: int | None = None
    total_pages: int | None = None
    first: bool | None = None
    last: bool | None = None

    def map(self, fn: Callable[[T], U]) -> Page[U]:
        """Return a page with the same meta-data and ``fn`` applied to every item."""
        return Page(
            content=tuple(fn(item) for item in self.content),
            page=self.page,
            size=self.size,
            total_elements=self.total_elements,
            total_pages=self.total_pages,
            first=self.first,
            last=self.last,
        )
