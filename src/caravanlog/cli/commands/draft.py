"""Draft editing commands."""

import click

from caravanlog.domain.errors import DomainError, ValidationError
from caravanlog.cli.error_handling import handle_domain_error
from caravanlog.utils.number_parser import format_grouped, plain_number

# Operator-friendly names for draft fields
FIELD_ALIASES = {
    "plate": "plate_number",
    "with-load": "with_load_kg",
    "gross": "with_load_kg",
    "without-load": "without_load_kg",
    "tare": "without_load_kg",
    "date": "date",
    "price": "price",
    "check": "check_number",
}

FIELD_LABELS = {
    "plate_number": "Plate Number",
    "with_load_kg": "With Load (Kg)",
    "without_load_kg": "Without Load (Kg)",
    "date": "Date",
    "price": "Price",
    "check_number": "Check Number",
}

WEIGHT_FIELDS = ("with_load_kg", "without_load_kg")


def resolve_field_name(name: str) -> str:
    """Map an alias such as "plate" or "tare" to its draft field name."""
    name = name.strip().lower()
    return FIELD_ALIASES.get(name, name.replace("-", "_"))


def focus_field(ctx: click.Context, field: str) -> None:
    """Move the operator to a draft field.

    In an interactive shell this prompts for the field right away; in a
    script there is nothing to focus and it only names the field.
    """
    session = ctx.obj["session"]
    label = FIELD_LABELS.get(field, field)
    if not ctx.obj.get("interactive"):
        click.echo(f"Next: {label}")
        return
    current = getattr(session.editor.draft, field, "")
    value = click.prompt(label, default=current, show_default=bool(current))
    session.set_field(field, value)


def _echo_preview(session) -> None:
    click.echo(f"Net weight: {format_grouped(session.editor.net_weight_preview())} kg")


@click.command("set", context_settings={"ignore_unknown_options": True})
@click.argument("field")
@click.argument("value", nargs=-1)
@click.pass_context
def set_field(ctx, field: str, value: tuple[str, ...]):
    """Set a draft field.

    FIELD is one of: plate, with-load (gross), without-load (tare), date,
    price, check.

    Examples:
        set plate 34Z 999 FA
        set with-load 40000
    """
    session = ctx.obj["session"]
    field_name = resolve_field_name(field)
    try:
        session.set_field(field_name, " ".join(value))
    except DomainError as e:
        handle_domain_error(ctx, e)

    if field_name in WEIGHT_FIELDS:
        _echo_preview(session)


@click.command("preview")
@click.pass_context
def preview(ctx):
    """Show the net weight computed from the draft weights."""
    _echo_preview(ctx.obj["session"])


@click.command("draft")
@click.pass_context
def show_draft(ctx):
    """Show the draft being edited."""
    session = ctx.obj["session"]
    draft = session.editor.draft
    mode = f"Update Entry {draft.editing_id}" if draft.is_editing else "Add Entry"
    click.echo(f"Draft ({mode}):")
    for field_name, label in FIELD_LABELS.items():
        click.echo(f"  {label}: {getattr(draft, field_name)}")
    click.echo(f"  Net Weight (Kg): {plain_number(session.editor.net_weight_preview())}")


@click.command("submit")
@click.pass_context
def submit(ctx):
    """Add the draft as a new entry, or update the entry being edited."""
    session = ctx.obj["session"]
    was_editing = session.editor.is_editing
    try:
        entry = session.submit()
    except ValidationError as e:
        click.echo(f"Error: {e}", err=True)
        if e.field:
            focus_field(ctx, e.field)
        ctx.exit(1)

    click.echo(f"{'Updated' if was_editing else 'Added'} entry {entry.id}")
    click.echo(f"  Plate Number: {entry.plate_number}")
    click.echo(f"  Net Weight: {format_grouped(entry.net_weight_kg)} kg")
    click.echo(f"  Date: {entry.date.isoformat()}")
    click.echo(f"  Price: {format_grouped(entry.price)}")


@click.command("edit")
@click.argument("reference")
@click.pass_context
def edit(ctx, reference: str):
    """Load an entry into the draft for editing.

    REFERENCE is the entry id or a unique leading part of it.
    """
    session = ctx.obj["session"]
    try:
        entry = session.begin_edit(reference)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Editing entry {entry.id} ({entry.plate_number})")


@click.command("reset")
@click.pass_context
def reset(ctx):
    """Clear the draft and leave edit mode."""
    ctx.obj["session"].reset()
    click.echo("Draft reset")


@click.command("relay")
@click.pass_context
def relay(ctx):
    """Jump to data entry at the plate number field."""
    focus_field(ctx, "plate_number")


@click.command("tariff")
@click.argument("name")
@click.pass_context
def tariff(ctx, name: str):
    """Set the draft price to a named tariff (baseline or premium)."""
    session = ctx.obj["session"]
    try:
        price = session.editor.apply_tariff(name)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Price set to {format_grouped(price)}")


def register_commands(group: click.Group) -> None:
    """Register draft commands with the session command group."""
    for command in (set_field, preview, show_draft, submit, edit, reset, relay, tariff):
        group.add_command(command)
