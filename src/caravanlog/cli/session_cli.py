"""Command group for lines typed inside a caravan session.

Every shell line or script line is parsed by ``session_cli`` with the live
CaravanSession in ``ctx.obj["session"]``.
"""

import logging
import shlex

import click

from caravanlog.cli.commands import draft, entries, search_cmd, session_cmd

logger = logging.getLogger(__name__)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def session_cli():
    """Caravan session commands.

    Typical flow: set plate, set with-load, set without-load, submit.
    """
    pass


@session_cli.command("help")
@click.pass_context
def show_help(ctx):
    """Show available commands."""
    click.echo(ctx.parent.get_help())


draft.register_commands(session_cli)
entries.register_commands(session_cli)
search_cmd.register_commands(session_cli)
session_cmd.register_commands(session_cli)


def run_line(line: str, obj: dict) -> int:
    """Run one session command line.

    Args:
        line: Command text, e.g. "set plate 34Z 999 FA"
        obj: Shared context object holding the session

    Returns:
        Exit code of the command (0 on success, blank and comment lines included)
    """
    # Only whole lines are comments; "#" inside a value is kept
    if line.lstrip().startswith("#"):
        return 0

    try:
        args = shlex.split(line)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        return 2

    if not args:
        return 0

    logger.debug("Running session command: %s", args)
    try:
        result = session_cli.main(
            args=args, prog_name="caravan", standalone_mode=False, obj=obj
        )
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1

    # standalone_mode=False returns the Exit code of ctx.exit() calls
    if isinstance(result, int):
        return result
    return 0
