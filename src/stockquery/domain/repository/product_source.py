"""Abstract source of product records.

Defined in the domain layer so the query core never depends on
infrastructure. The HTTP catalog client and the file-backed store both
live in the infrastructure layer and are chosen by the composition root.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockquery.domain.model.page import Page
from stockquery.domain.model.product import UpstreamProduct


class ProductSource(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> UpstreamProduct | None:
        """Return one product, or None if the source answered with no body.

        Raises ProductNotFoundError when the source reports the product
        does not exist, and an UpstreamFailure for anything else.
        """

    @abstractmethod
    def get_page(self, page: int, size: int) -> Page[UpstreamProduct] | None:
        """Return one zero-based page, or None if the source answered with no body."""
