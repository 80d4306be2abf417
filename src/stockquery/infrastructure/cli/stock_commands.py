"""CLI commands for stock queries."""

from __future__ import annotations

import json

import click

from stockquery.application.dto import StockViewDTO
from stockquery.domain.exceptions import (
    InvalidResponseError,
    StockQueryError,
    UpstreamError,
    UpstreamUnavailableError,
    ValidationError,
)
from stockquery.infrastructure.bootstrap import (
    list_all_stock_handler,
    list_stock_page_handler,
    show_stock_handler,
)
from stockquery.infrastructure.config import Settings


class UpstreamFailureException(click.ClickException):
    """The catalog could not answer; distinct exit code from 'not found'."""

    exit_code = 3


def describe_failure(exc: StockQueryError) -> str:
    """Turn a core error into the message shown to the user."""
    if isinstance(exc, UpstreamUnavailableError):
        return f"Service unavailable: {exc.message}"
    if isinstance(exc, InvalidResponseError):
        return f"Invalid response from product service: {exc.message}"
    if isinstance(exc, UpstreamError):
        return f"Product service error (status {exc.status_code}): {exc.message}"
    if isinstance(exc, ValidationError):
        return f"Invalid input: {exc}"
    return str(exc)


def _fail(exc: StockQueryError) -> click.ClickException:
    if isinstance(exc, ValidationError):
        return click.ClickException(describe_failure(exc))
    return UpstreamFailureException(describe_failure(exc))


def _format_flag(value: bool | None) -> str:
    if value is None:
        return "unknown"
    return "yes" if value else "no"


def _display_rows(items: list[StockViewDTO]) -> None:
    click.echo(f"{'Product ID':<38} {'Name':<24} {'Qty':>6} {'Below min':>10}")
    click.echo("-" * 81)
    for item in items:
        qty = "?" if item.quantity_available is None else str(item.quantity_available)
        click.echo(
            f"{item.product_id:<38} {item.product_name:<24} {qty:>6} "
            f"{_format_flag(item.stock_below_minimum):>10}"
        )


@click.command("show")
@click.argument("product_id")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_obj
def stock_show(settings: Settings, product_id: str, as_json: bool) -> None:
    """Show stock for a single product."""
    try:
        handler = show_stock_handler(settings)
        dto = handler.handle(product_id)
    except StockQueryError as exc:
        raise _fail(exc)

    if dto is None:
        raise click.ClickException(f"Stock for product '{product_id}' not found")

    if as_json:
        click.echo(json.dumps(dto.to_dict(), indent=2))
        return

    _display_rows([dto])
    click.echo(f"Last updated: {dto.last_updated}")


@click.command("page")
@click.option("--page", type=int, default=0, show_default=True, help="Zero-based page index.")
@click.option("--size", type=int, default=20, show_default=True, help="Page size (max 100).")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_obj
def stock_page(settings: Settings, page: int, size: int, as_json: bool) -> None:
    """Show one page of stock levels."""
    try:
        handler = list_stock_page_handler(settings)
        dto = handler.handle(page=page, size=size)
    except StockQueryError as exc:
        raise _fail(exc)

    if as_json:
        click.echo(json.dumps(dto.to_dict(), indent=2))
        return

    if not dto.content:
        click.echo("No stock records on this page.")
    else:
        _display_rows(dto.content)

    current = (dto.page or 0) + 1
    total_pages = "?" if dto.total_pages is None else dto.total_pages
    total = "?" if dto.total_elements is None else dto.total_elements
    click.echo(f"Page {current} of {total_pages} ({total} products)")


@click.command("all")
@click.option("--size", type=int, default=20, show_default=True, help="Page size used while walking pages (max 100).")
@click.option("--start-page", type=int, default=0, show_default=True, help="Zero-based page to start from.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_obj
def stock_all(settings: Settings, size: int, start_page: int, as_json: bool) -> None:
    """List stock for every product, walking all catalog pages."""
    try:
        handler = list_all_stock_handler(settings)
        items = handler.handle(page_size=size, start_page=start_page)
    except StockQueryError as exc:
        raise _fail(exc)

    if as_json:
        click.echo(json.dumps([item.to_dict() for item in items], indent=2))
        return

    if not items:
        click.echo("No stock records found.")
        return

    _display_rows(items)
    below = sum(1 for item in items if item.stock_below_minimum)
    click.echo(f"Total: {len(items)} products, {below} below minimum stock")
