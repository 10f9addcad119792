"""Commands for working with plugin description files."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from plugdesc.config import ConfigError, SerializerOptions, load_options
from plugdesc.descriptor import (
    InvalidDescriptionError,
    PluginDescription,
    dumps,
    load_description,
    save_description,
)

console = Console()


def _resolve_options(config_path, symmetric):
    options = SerializerOptions()
    if config_path:
        try:
            options = load_options(Path(config_path))
        except ConfigError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            raise SystemExit(1)
    if symmetric:
        options = options.model_copy(update={"symmetric": True})
    return options


def _write(description, output, options):
    if output:
        save_description(description, output, options)
        console.print(f"[green]Wrote {escape(str(output))}[/green]")
    else:
        click.echo(dumps(description, options), nl=False)


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path())
def validate(files):
    """Check that plugin description files are valid."""
    failed = 0
    for path in files:
        try:
            description = load_description(path)
        except InvalidDescriptionError as e:
            failed += 1
            console.print(f"[red]FAIL[/red] {escape(path)}: {escape(str(e))}")
            continue
        console.print(
            f"[green]OK[/green]   {escape(path)}: "
            f"{escape(description.name)} {escape(description.version)}"
        )

    if failed:
        console.print(f"\n[red]{failed} of {len(files)} file(s) invalid[/red]")
        raise SystemExit(1)


@click.command()
@click.argument("file", type=click.Path())
def show(file):
    """Display the contents of a plugin description."""
    try:
        description = load_description(file)
    except InvalidDescriptionError as e:
        console.print(f"[red]{escape(file)}: {escape(str(e))}[/red]")
        raise SystemExit(1)

    table = Table(title=f"Plugin: {escape(description.name)}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    commands = description.commands
    if isinstance(commands, dict):
        command_text = ", ".join(str(c) for c in commands)
    else:
        command_text = "" if commands is None else str(commands)

    perms = description.permissions
    if perms is None:
        perm_text = ""
    elif hasattr(perms, "names"):
        perm_text = ", ".join(perms.names())
    else:
        perm_text = str(perms)

    rows = [
        ("Name", description.name),
        ("Version", description.version),
        ("Main", description.main),
        ("Description", description.description),
        ("Authors", ", ".join(description.authors)),
        ("Website", description.website),
        ("Commands", command_text),
        ("Permissions", perm_text),
    ]
    # Values come from the document and are shown literally
    for label, value in rows:
        table.add_row(label, Text(value or "-"))

    console.print(table)


@click.command()
@click.argument("file", type=click.Path())
@click.option("-o", "--output", type=click.Path(), default=None, help="Write to this file instead of stdout")
@click.option("--config", "config_path", type=click.Path(), default=None, help="Serializer options YAML file")
@click.option("--symmetric", is_flag=True, help="Keep 'commands' and 'permissions' in the output")
def normalize(file, output, config_path, symmetric):
    """Rewrite a plugin description in canonical form."""
    options = _resolve_options(config_path, symmetric)
    try:
        description = load_description(file)
    except InvalidDescriptionError as e:
        console.print(f"[red]{escape(file)}: {escape(str(e))}[/red]")
        raise SystemExit(1)
    _write(description, output, options)


@click.command()
@click.argument("name")
@click.argument("version")
@click.argument("main")
@click.option("-o", "--output", type=click.Path(), default=None, help="Write to this file instead of stdout")
def init(name, version, main, output):
    """Create a minimal plugin description."""
    _write(PluginDescription.build(name, version, main), output, SerializerOptions())
