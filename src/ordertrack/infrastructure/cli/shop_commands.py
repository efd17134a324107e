"""CLI commands for the shop profile."""

from __future__ import annotations

import click

from ordertrack.application.shop_profile import SetupShopHandler, ShowShopHandler
from ordertrack.domain.exceptions import DomainException
from ordertrack.infrastructure.bootstrap import shop_repository
from ordertrack.infrastructure.cli.common import open_context


@click.command("setup")
@click.option("--name", required=True, prompt="Shop name", help="Shop name.")
def shop_setup(name: str) -> None:
    """Set or change the shop name."""
    handler = SetupShopHandler(shop_repo=shop_repository())

    with open_context() as context:
        try:
            profile = handler.handle(context, name)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Shop '{profile.shop_name}' saved.")


@click.command("show")
def shop_show() -> None:
    """Show the shop profile."""
    handler = ShowShopHandler(shop_repo=shop_repository())

    with open_context() as context:
        try:
            profile = handler.handle(context)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(profile.shop_name)
