"""User lookup and credential check commands."""

import click
from invoicedash.cli.error_handling import handle_domain_error
from invoicedash.domain.auth import authorize
from invoicedash.domain.errors import DomainError, user_not_found
from invoicedash.domain.user import UserService


@click.group()
def users_group():
    """Look up users."""
    pass


@users_group.command("show")
@click.argument("email", metavar="EMAIL")
@click.pass_context
def show_user(ctx, email: str):
    """Show the user registered with EMAIL."""
    db = ctx.obj["db"]
    service = UserService(db)

    try:
        user = service.get_user(email)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if user is None:
        click.echo(f"Error: {user_not_found(email)}", err=True)
        ctx.exit(1)

    click.echo(f"User ID: {user.id}")
    click.echo(f"  Name: {user.name}")
    click.echo(f"  Email: {user.email}")


@click.command("login")
@click.argument("email", metavar="EMAIL")
@click.option("--password", prompt=True, hide_input=True, help="Account password")
@click.pass_context
def login(ctx, email: str, password: str):
    """Check EMAIL and password against the stored credentials.

    Exits with status 1 when the credentials are rejected.
    """
    db = ctx.obj["db"]

    try:
        user = authorize(db, {"email": email, "password": password})
    except DomainError as e:
        handle_domain_error(ctx, e)

    if user is None:
        click.echo("Error: Invalid credentials.", err=True)
        ctx.exit(1)

    click.echo(f"Signed in as {user.name} ({user.email})")


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(users_group, name="users")
    cli.add_command(login)
