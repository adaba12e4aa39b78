"""Entry listing and deletion commands."""

import click

from caravanlog.cli.error_handling import handle_domain_error
from caravanlog.cli.rendering import render_table
from caravanlog.domain.errors import DomainError

APP_TITLE = "Caravan Weight Log"


def echo_entries(session, color: bool = True) -> None:
    """Show the status line and the rows for the current search term."""
    click.echo(session.status_line())
    rows = session.rows()
    if not rows:
        click.echo(session.empty_message())
        return
    for line in render_table(rows, session.normalized_search, color=color):
        click.echo(line)


@click.command("list")
@click.pass_context
def list_entries(ctx):
    """List entries, filtered by the active search term."""
    echo_entries(ctx.obj["session"])


@click.command("delete")
@click.argument("reference")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_entry(ctx, reference: str, yes: bool):
    """Delete an entry.

    REFERENCE is the entry id or a unique leading part of it. Deleting the
    entry being edited also resets the draft.
    """
    session = ctx.obj["session"]

    if ctx.obj.get("interactive") and not yes:
        if not click.confirm(f"Are you sure you want to delete entry {reference}?"):
            click.echo("Deletion cancelled.")
            return

    was_editing = session.editor.editing_id
    try:
        entry = session.delete(reference)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted entry {entry.id} ({entry.plate_number})")
    if was_editing == entry.id:
        click.echo("Draft reset")


@click.command("print")
@click.pass_context
def print_entries(ctx):
    """Print the table without colors."""
    session = ctx.obj["session"]
    click.echo(APP_TITLE)
    click.echo("=" * len(APP_TITLE))
    echo_entries(session, color=False)


def register_commands(group: click.Group) -> None:
    """Register entry commands with the session command group."""
    group.add_command(list_entries)
    group.add_command(delete_entry)
    group.add_command(print_entries)
