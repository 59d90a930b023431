"""Helpers shared by the cart, promo and order commands."""

from __future__ import annotations

from typing import Any, Sequence

import click

from pricing.domain.exceptions import DomainException, ValidationError
from pricing.domain.model.cart import CartItemError, ValidatedLineItem


def parse_items(raw: str) -> list[dict[str, Any]]:
    """Parse 'id:2,id:1:M' into request item payloads.

    Each entry is ``productId:quantity`` with an optional ``:size``.
    Field rules (UUID format, quantity range...) are left to the use case.
    """
    items: list[dict[str, Any]] = []
    for entry in raw.split(","):
        entry = entry.strip()
        parts = entry.split(":")
        if len(parts) not in (2, 3):
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'ProductId:Quantity[:Size]'."
            )
        product_id, qty_str = parts[0].strip(), parts[1].strip()
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        item: dict[str, Any] = {"productId": product_id, "quantity": qty}
        if len(parts) == 3:
            item["size"] = parts[2]
        items.append(item)
    return items


def describe_error(exc: DomainException) -> str:
    """One-line message for a rejected request, naming the field when known."""
    if isinstance(exc, ValidationError) and exc.field and exc.field not in exc.message:
        return f"{exc.field}: {exc.message}"
    return str(exc)


def display_lines(items: Sequence[ValidatedLineItem], errors: Sequence[CartItemError]) -> None:
    """Shared formatting for priced lines and rejected lines."""
    click.echo(f"  {'Product':<38} {'Size':<6} {'Qty':>4} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*72}")
    for item in items:
        click.echo(
            f"  {item.product_id:<38} {item.size or '-':<6} {item.quantity:>4} "
            f"{item.unit_price:>10.2f} {item.subtotal:>10.2f}"
        )
    for error in errors:
        click.echo(f"  {error.product_id:<38} {error.code.value}: {error.message}")
    click.echo(f"  {'-'*72}")
