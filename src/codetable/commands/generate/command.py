"""Generate command."""

import click
import rich.console

from codetable.errors import CodeTableError

from .process import GeneratorConfig
from .process import main as _generate


@click.command("generate")
def main() -> None:
    """Download the multicodec table and write code_table.go.

    Overwrites any existing code_table.go in the current directory.
    """
    console = rich.console.Console()
    try:
        _generate(GeneratorConfig(), console)
    except (CodeTableError, OSError) as ex:
        click.echo(f"Error: {ex}", err=True)
        raise click.exceptions.Exit(2) from ex
