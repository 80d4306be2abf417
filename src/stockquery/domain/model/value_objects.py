"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockquery.domain.exceptions import ValidationError

DEFAULT_MINIMUM_STOCK = 10
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class StockThreshold:
    """Quantity under which a product counts as below minimum stock."""

    value: int = DEFAULT_MINIMUM_STOCK

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Stock threshold must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError(
                f"Stock threshold cannot be negative, got {self.value}"
            )

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class PageRequest:
    """A zero-based page index plus a page size within [1, MAX_PAGE_SIZE].

    Build through ``of()`` to get the permissive normalization the query
    endpoints apply; the constructor itself only accepts valid values.
    """

    page: int = 0
    size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValidationError(f"Page index cannot be negative, got {self.page}")
        if not 1 <= self.size <= MAX_PAGE_SIZE:
            raise ValidationError(
                f"Page size must be between 1 and {MAX_PAGE_SIZE}, got {self.size}"
            )

    def next(self) -> PageRequest:
        return PageRequest(self.page + 1, self.size)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(
        page: int | None = None,
        size: int | None = None,
        default_size: int = DEFAULT_PAGE_SIZE,
    ) -> PageRequest:
        """Normalize raw caller input instead of rejecting it.

        Missing values take their defaults, a negative page becomes 0
        and the size is clamped into [1, MAX_PAGE_SIZE].
        """
        page = 0 if page is None or page < 0 else page
        size = default_size if size is None else size
        return PageRequest(page, clamp_page_size(size))


def clamp_page_size(size: int) -> int:
    return max(1, min(size, MAX_PAGE_SIZE))
