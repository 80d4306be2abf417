import click

from stockquery.domain.exceptions import ValidationError
from stockquery.infrastructure.cli.stock_commands import stock_all, stock_page, stock_show
from stockquery.infrastructure.config import Settings
from stockquery.infrastructure.logging_config import configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (defaults to STOCKQ_LOG_LEVEL or INFO).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Stock Query: stock availability from the product catalog."""
    try:
        settings = Settings.from_env()
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")
    configure_logging(log_level or settings.log_level)
    ctx.obj = settings


@cli.group()
def stock() -> None:
    """Query stock levels."""


# Register subcommands
stock.add_command(stock_all)
stock.add_command(stock_page)
stock.add_command(stock_show)
