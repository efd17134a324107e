"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import click

from ordertrack.application.dto import OrderDTO
from ordertrack.application.session_context import SessionContext
from ordertrack.domain.exceptions import DomainException
from ordertrack.infrastructure.bootstrap import session_context


def open_context() -> SessionContext:
    try:
        return session_context()
    except DomainException as exc:
        raise click.ClickException(str(exc))


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.order_number}  (status={dto.order_status})")
    click.echo(f"ID:       {dto.id}")
    click.echo(f"Customer: {dto.customer_name}  ({dto.mobile_number})")
    if dto.order_type:
        click.echo(f"Type:     {dto.order_type}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>6} {'Price':>10} {'Total':>12}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>6} {item.unit_price:>10} {item.line_total:>12}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Total Items':<27} {dto.total_quantity:>24}")
    click.echo(f"  {'Total Bill':<27} {dto.total:>24}")
    click.echo(f"  {'Advance Paid':<27} {dto.advance_paid:>24}")
    click.echo(f"  {'Payment Status':<27} {dto.payment_status:>24}")
    click.echo(f"  {'Balance Due':<27} {dto.balance_due:>24}")
    click.echo()
    click.echo(f"Payment mode: {dto.payment_mode or '-'}   Last update: {dto.updated_at}")
