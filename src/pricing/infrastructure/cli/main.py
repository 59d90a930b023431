import click

from pricing.infrastructure.cli.cart_commands import cart_validate
from pricing.infrastructure.cli.order_commands import order_total
from pricing.infrastructure.cli.promo_commands import promo_validate
from pricing.infrastructure.logging_config import configure_logging


@click.group()
@click.option("-v", "--verbose", count=True, help="Log INFO (-v) or DEBUG (-vv) to stderr.")
def cli(verbose: int) -> None:
    """Cart pricing: validate carts, promo codes and order totals"""
    configure_logging({0: "WARNING", 1: "INFO"}.get(verbose, "DEBUG"))


@cli.group()
def cart() -> None:
    """Validate carts."""


@cli.group()
def promo() -> None:
    """Check promo codes."""


@cli.group()
def order() -> None:
    """Price orders."""


# Register subcommands
cart.add_command(cart_validate)
promo.add_command(promo_validate)
order.add_command(order_total)
