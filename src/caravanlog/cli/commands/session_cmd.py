"""Session lifecycle commands."""

import click


@click.command("reload")
@click.pass_context
def reload_session(ctx):
    """Start over: discard every entry, the draft and the search term."""
    ctx.obj["session"].reload()
    click.echo("Session reloaded. All entries discarded.")


@click.command("quit")
@click.pass_context
def quit_session(ctx):
    """Leave the session."""
    ctx.obj["quit"] = True


def register_commands(group: click.Group) -> None:
    """Register session commands with the session command group."""
    group.add_command(reload_session)
    group.add_command(quit_session)
    group.add_command(quit_session, name="exit")
