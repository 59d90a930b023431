"""CLI commands for promo codes."""

from __future__ import annotations

import json

import click

from pricing.domain.exceptions import DomainException
from pricing.infrastructure.bootstrap import validate_promo_code_handler
from pricing.infrastructure.cli._common import describe_error


@click.command("validate")
@click.option("--code", required=True, help="Promo code (case-insensitive).")
@click.option("--order-total", type=float, default=None, help="Order amount to discount.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the raw result as JSON.")
def promo_validate(code: str, order_total: float | None, as_json: bool) -> None:
    """Check a promo code and compute its discount."""
    payload: dict = {"code": code}
    if order_total is not None:
        payload["orderTotal"] = order_total

    handler = validate_promo_code_handler()

    try:
        result = handler.handle(payload)
    except DomainException as exc:
        raise click.ClickException(describe_error(exc))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    click.echo(f"{result.code}: {result.message}")
    if result.valid:
        click.echo(f"  Type:     {result.discount_type.value}")
        click.echo(f"  Value:    {result.discount_value}")
        if result.calculated_discount is not None:
            click.echo(f"  Discount: {result.calculated_discount:.2f}")
