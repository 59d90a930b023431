"""CLI commands for order totals."""

from __future__ import annotations

import json

import click

from pricing.application.dto import OrderTotalResult
from pricing.domain.exceptions import DomainException
from pricing.infrastructure.bootstrap import calculate_order_total_handler
from pricing.infrastructure.cli._common import describe_error, display_lines, parse_items


def _display_total(result: OrderTotalResult) -> None:
    status = "valid" if result.valid else "invalid"
    click.echo(f"Order total  (cart {status}, {result.item_count} item(s))")
    click.echo()
    display_lines(result.validated_items, result.cart_errors)
    click.echo(f"  {'Subtotal':<50} {result.subtotal:>22.2f}")
    if result.applied_promo_code is not None:
        label = f"Discount ({result.applied_promo_code.code})"
        click.echo(f"  {label:<50} {-result.discount_amount:>22.2f}")
    click.echo(f"  {'Shipping':<50} {result.shipping_cost:>22.2f}")
    click.echo(f"  {'Tax':<50} {result.tax_amount:>22.2f}")
    click.echo(f"  {'-'*72}")
    click.echo(f"  {'Total ' + result.currency:<50} {result.total:>22.2f}")
    if result.promo_code_message is not None:
        click.echo(f"Promo code not applied: {result.promo_code_message}")


@click.command("total")
@click.option("--items", required=True, help="Items as 'ProductId:Qty[:Size],...'.")
@click.option("--promo", "promo_code", default=None, help="Promo code to apply.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the raw result as JSON.")
def order_total(items: str, promo_code: str | None, as_json: bool) -> None:
    """Calculate subtotal, discount, shipping, tax and total for a cart."""
    payload: dict = {"items": parse_items(items)}
    if promo_code is not None:
        payload["promoCode"] = promo_code

    handler = calculate_order_total_handler()

    try:
        result = handler.handle(payload)
    except DomainException as exc:
        raise click.ClickException(describe_error(exc))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return
    _display_total(result)
