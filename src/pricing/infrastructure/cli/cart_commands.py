"""CLI commands for cart validation."""

from __future__ import annotations

import json

import click

from pricing.application.dto import CartValidationResult
from pricing.domain.exceptions import DomainException
from pricing.infrastructure.bootstrap import validate_cart_handler
from pricing.infrastructure.cli._common import describe_error, display_lines, parse_items


def _display_cart(result: CartValidationResult) -> None:
    status = "valid" if result.valid else "invalid"
    click.echo(f"Cart {status}  ({len(result.items)} priced, {len(result.errors)} rejected)")
    click.echo()
    display_lines(result.items, result.errors)
    click.echo(f"  {'Items':<50} {result.summary.item_count:>22}")
    click.echo(f"  {'Subtotal':<50} {result.summary.subtotal:>22.2f}")


@click.command("validate")
@click.option("--items", required=True, help="Items as 'ProductId:Qty[:Size],...'.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the raw result as JSON.")
def cart_validate(items: str, as_json: bool) -> None:
    """Validate cart lines against the current catalog."""
    payload = {"items": parse_items(items)}
    handler = validate_cart_handler()

    try:
        result = handler.handle(payload)
    except DomainException as exc:
        raise click.ClickException(describe_error(exc))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return
    _display_cart(result)
