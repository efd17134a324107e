"""CLI commands for the dashboard and the menu."""

from __future__ import annotations

import click

from ordertrack.application.formatting import format_currency
from ordertrack.application.show_dashboard import ShowDashboardHandler
from ordertrack.domain.exceptions import DomainException
from ordertrack.domain.model.menu import BIRYANI_MENU
from ordertrack.domain.service.dashboard import TimeRange
from ordertrack.infrastructure.bootstrap import order_repository, settings
from ordertrack.infrastructure.cli.common import open_context


@click.command("dashboard")
@click.option(
    "--range",
    "time_range",
    default=TimeRange.TODAY.value,
    show_default=True,
    type=click.Choice([r.value for r in TimeRange]),
)
def dashboard(time_range: str) -> None:
    """Show orders, revenue and balance owed for a period."""
    handler = ShowDashboardHandler(order_repo=order_repository(), tz=settings().tz)

    with open_context() as context:
        try:
            stats = handler.handle(context, TimeRange(time_range))
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Live Overview ({stats.time_range})")
    click.echo("-" * 36)
    click.echo(f"{'Orders':<18} {stats.total_orders:>17}")
    click.echo(f"{'Revenue':<18} {stats.revenue:>17}")
    click.echo(f"{'Balance Owed':<18} {stats.balance_owed:>17}")
    click.echo(f"{'Best Seller':<18} {stats.best_seller:>17}")
    click.echo(f"{'Remaining Orders':<18} {stats.remaining_orders:>17}")


@click.command("list")
def menu_list() -> None:
    """List menu items and their price per kg."""
    click.echo(f"{'Item':<20} {'Price/kg':>10}")
    click.echo("-" * 31)
    for item in BIRYANI_MENU.list_all():
        click.echo(f"{item.name:<20} {format_currency(item.price_per_unit):>10}")
