"""HTTP implementation of ProductSource, backed by the product catalog service.

One request per call: no retries, no caching. Transport errors become
UpstreamUnavailableError, any other non-success status an UpstreamError
with the original status and body preserved.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import pydantic
import requests

from stockquery.domain.exceptions import (
    InvalidResponseError,
    ProductNotFoundError,
    UpstreamError,
    UpstreamUnavailableError,
)
from stockquery.domain.model.page import Page
from stockquery.domain.model.product import UpstreamProduct
from stockquery.domain.repository.product_source import ProductSource
from stockquery.infrastructure.client.schemas import ProductPagePayload, ProductPayload

logger = logging.getLogger(__name__)

_MAX_ERROR_BODY = 500


class HttpProductSource(ProductSource):

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    # --- ProductSource interface ----------------------------------------------

    def get_by_id(self, product_id: str) -> UpstreamProduct | None:
        response = self._get(f"/products/{quote(product_id, safe='')}")
        if response.status_code == 404:
            raise ProductNotFoundError(product_id)
        self._raise_for_status(response)

        body = self._json_body(response)
        if body is None:
            return None
        return self._parse(ProductPayload, body, response.status_code).to_domain()

    def get_page(self, page: int, size: int) -> Page[UpstreamProduct] | None:
        response = self._get("/products", params={"page": page, "size": size})
        self._raise_for_status(response)

        body = self._json_body(response)
        if body is None:
            return None
        return self._parse(ProductPagePayload, body, response.status_code).to_domain()

    # --- HTTP helpers ---------------------------------------------------------

    def _get(self, path: str, params: dict[str, Any] | None = None) -> requests.Response:
        url = f"{self._base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self._session.get(url, params=params, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.error("Could not reach product service at %s: %s", url, exc)
            raise UpstreamUnavailableError(
                f"Could not connect to product service: {exc}"
            ) from exc
        logger.debug("GET %s -> %d", url, response.status_code)
        return response

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        if 200 <= response.status_code < 300:
            return
        body = (response.text or "")[:_MAX_ERROR_BODY]
        logger.warning(
            "Product service answered %d for %s", response.status_code, response.url
        )
        message = f"Product service returned status {response.status_code}"
        if body:
            message = f"{message}: {body}"
        raise UpstreamError(message, status_code=response.status_code)

    @staticmethod
    def _json_body(response: requests.Response) -> Any:
        if not response.content or not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise InvalidResponseError(
                "Product service returned a body that is not JSON",
                status_code=response.status_code,
            ) from exc

    @staticmethod
    def _parse(schema: type[pydantic.BaseModel], body: Any, status_code: int):
        try:
            return schema.model_validate(body)
        except pydantic.ValidationError as exc:
            raise InvalidResponseError(
                f"Unexpected product service payload: {exc.error_count()} invalid field(s)",
                status_code=status_code,
            ) from exc
