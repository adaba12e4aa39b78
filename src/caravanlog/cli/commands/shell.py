"""Interactive shell and script runner commands."""

import click

from caravanlog.cli.session_cli import run_line
from caravanlog.session import CaravanSession

PROMPT = "caravan> "


def _open_session(ctx: click.Context, interactive: bool) -> dict:
    session = CaravanSession(ctx.obj["settings"])
    return {"session": session, "interactive": interactive, "quit": False}


@click.command("shell")
@click.pass_context
def shell(ctx):
    """Start an interactive caravan session.

    Entries live only as long as the session. Type "help" for commands and
    "quit" to leave.
    """
    obj = _open_session(ctx, interactive=True)
    session = obj["session"]
    click.echo('Caravan Weight Log. Type "help" for commands, "quit" to leave.')
    try:
        while not obj["quit"]:
            try:
                line = click.prompt(
                    PROMPT.rstrip(), prompt_suffix=" ", default="", show_default=False
                )
            except (EOFError, click.Abort):
                break
            run_line(line, obj)
    finally:
        session.close()


@click.command("run")
@click.argument("script", type=click.File("r"))
@click.option(
    "--keep-going", is_flag=True, help="Continue after a failing line instead of stopping"
)
@click.pass_context
def run_script(ctx, script, keep_going: bool):
    """Run session commands from a file, one per line.

    Lines starting with # are comments.

    Examples:
        caravanlog run entries.txt
    """
    obj = _open_session(ctx, interactive=False)
    session = obj["session"]
    failures = 0
    try:
        for line_number, line in enumerate(script, start=1):
            if obj["quit"]:
                break
            exit_code = run_line(line, obj)
            if exit_code != 0:
                failures += 1
                click.echo(f"Error at line {line_number}: {line.strip()}", err=True)
                if not keep_going:
                    ctx.exit(1)
    finally:
        session.close()

    if failures:
        ctx.exit(1)


def register_commands(cli: click.Group) -> None:
    """Register shell commands with main CLI."""
    cli.add_command(shell)
    cli.add_command(run_script)
