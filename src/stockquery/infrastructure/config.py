"""
Runtime settings for the stock query service.

Configuration is loaded from environment variables:
- PRODUCT_SERVICE_URL: catalog base URL (default: http://localhost:8081)
- PRODUCT_SERVICE_TIMEOUT: per-request timeout in seconds (default: 5.0)
- STOCK_MINIMUM_LIMIT: below-minimum threshold (default: 10)
- STOCK_SOURCE: "http" or "json" (default: http)
- STOCK_DATA_FILE: products file for the json source (default: data/products.json)
- STOCK_MAX_PAGES: optional cap on pages fetched by a full listing
- STOCKQ_LOG_LEVEL: logging level (default: INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from stockquery.domain.exceptions import ValidationError
from stockquery.domain.model.value_objects import DEFAULT_MINIMUM_STOCK

SOURCES = ("http", "json")


@dataclass(frozen=True)
class Settings:

    product_service_url: str = "http://localhost:8081"
    product_service_timeout: float = 5.0
    minimum_stock: int = DEFAULT_MINIMUM_STOCK
    source: str = "http"
    data_file: Path = Path("data/products.json")
    max_pages: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        source = env.get("STOCK_SOURCE", "http").strip().lower()
        if source not in SOURCES:
            raise ValidationError(
                f"STOCK_SOURCE must be one of {', '.join(SOURCES)}, got {source!r}"
            )

        return cls(
            product_service_url=env.get("PRODUCT_SERVICE_URL", cls.product_service_url),
            product_service_timeout=_number(
                env, "PRODUCT_SERVICE_TIMEOUT", float, cls.product_service_timeout
            ),
            minimum_stock=_number(
                env, "STOCK_MINIMUM_LIMIT", int, cls.minimum_stock, minimum=0
            ),
            source=source,
            data_file=Path(env.get("STOCK_DATA_FILE", str(cls.data_file))),
            max_pages=_number(env, "STOCK_MAX_PAGES", int, None),
            log_level=env.get("STOCKQ_LOG_LEVEL", cls.log_level).upper(),
        )


def _number(
    env: Mapping[str, str], name: str, kind: type, default, minimum: int | None = None
):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = kind(raw)
    except ValueError as exc:
        noun = "an integer" if kind is int else "a number"
        raise ValidationError(f"{name} must be {noun}, got {raw!r}") from exc
    if minimum is None and value <= 0:
        raise ValidationError(f"{name} must be positive, got {raw!r}")
    if minimum is not None and value < minimum:
        raise ValidationError(f"{name} must be at least {minimum}, got {raw!r}")
    return value
