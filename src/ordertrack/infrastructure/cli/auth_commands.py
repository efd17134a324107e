"""CLI commands for signing in and out."""

from __future__ import annotations

import click

from ordertrack.domain.exceptions import DomainException
from ordertrack.infrastructure.bootstrap import auth_gateway, session_store
from ordertrack.infrastructure.cli.common import open_context


@click.command("login")
@click.option("--email", required=True, prompt=True, help="Account email.")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Account password.")
def auth_login(email: str, password: str) -> None:
    """Sign in and remember the session for later commands."""
    try:
        session = auth_gateway().sign_in(email=email, password=password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    session_store().save(session)
    click.echo(f"Signed in as {session.user.email or session.user.id}")


@click.command("logout")
def auth_logout() -> None:
    """Sign out and forget the saved session."""
    with open_context() as context:
        if context.is_signed_in:
            try:
                auth_gateway().sign_out()
            except DomainException as exc:
                raise click.ClickException(str(exc))

    session_store().clear()
    click.echo("Signed out.")


@click.command("whoami")
def auth_whoami() -> None:
    """Show the signed-in account."""
    with open_context() as context:
        try:
            user = context.require_user()
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"{user.email or '-'} (shop id {user.id})")
