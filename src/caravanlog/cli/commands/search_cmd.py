"""Search commands."""

import click

from caravanlog.cli.commands.entries import echo_entries


@click.command("search")
@click.argument("term", nargs=-1)
@click.pass_context
def search_entries(ctx, term: tuple[str, ...]):
    """Filter the table by a search term and highlight matches.

    The term is matched case-insensitively against plate number, date,
    price, weights and check number. An empty term shows every entry.

    Examples:
        search 999
        search 34z
    """
    session = ctx.obj["session"]
    session.set_search(" ".join(term))
    echo_entries(session)


@click.command("clear-search")
@click.pass_context
def clear_search(ctx):
    """Stop filtering and show every entry."""
    session = ctx.obj["session"]
    session.clear_search()
    echo_entries(session)


def register_commands(group: click.Group) -> None:
    """Register search commands with the session command group."""
    group.add_command(search_entries)
    group.add_command(clear_search)
