"""Domain-level exceptions.

Every error raised by the stock query core is a subclass of
StockQueryError so the CLI layer can catch them uniformly. Upstream
problems carry the status code reported by the source (or
``NO_CONNECTION`` when nothing answered) so the presentation layer can
choose its own response without re-reading business logic.
"""

NO_CONNECTION = -1


class StockQueryError(Exception):
    """Base class for all stock query errors."""


class ValidationError(StockQueryError):
    """A value or configuration invariant was violated."""


class UpstreamFailure(StockQueryError):
    """The product source could not deliver a usable answer."""

    def __init__(self, message: str, status_code: int = NO_CONNECTION) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ProductNotFoundError(UpstreamFailure):
    """The source explicitly reported that the product does not exist."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product '{product_id}' not found", status_code=404)
        self.product_id = product_id


class InvalidResponseError(UpstreamFailure):
    """The source reported success but returned no usable body."""


class UpstreamUnavailableError(UpstreamFailure):
    """Transport-level failure: the source could not be reached."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=NO_CONNECTION)


class UpstreamError(UpstreamFailure):
    """Any other non-success status returned by the source."""


class TraversalLimitError(UpstreamFailure):
    """The source kept reporting more pages past the configured guard."""
