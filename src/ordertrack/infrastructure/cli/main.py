import click
from pydantic import ValidationError as SettingsError

from ordertrack.infrastructure.bootstrap import settings
from ordertrack.infrastructure.cli.auth_commands import auth_login, auth_logout, auth_whoami
from ordertrack.infrastructure.cli.dashboard_commands import dashboard, menu_list
from ordertrack.infrastructure.cli.order_commands import (
    order_call,
    order_create,
    order_create_menu,
    order_delete,
    order_list,
    order_receipt,
    order_show,
    order_toggle,
    order_update,
)
from ordertrack.infrastructure.cli.shop_commands import shop_setup, shop_show
from ordertrack.infrastructure.logging_config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """OrderTrack: shop order and payment tracking."""
    try:
        level = "DEBUG" if verbose else settings().log_level
    except SettingsError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")
    configure_logging(level)


@cli.group()
def auth() -> None:
    """Sign in and out."""


@cli.group()
def shop() -> None:
    """Manage the shop profile."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def menu() -> None:
    """Show the menu."""


# Register subcommands
auth.add_command(auth_login)
auth.add_command(auth_logout)
auth.add_command(auth_whoami)
shop.add_command(shop_setup)
shop.add_command(shop_show)
order.add_command(order_call)
order.add_command(order_create)
order.add_command(order_create_menu)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_receipt)
order.add_command(order_show)
order.add_command(order_toggle)
order.add_command(order_update)
menu.add_command(menu_list)
cli.add_command(dashboard)
