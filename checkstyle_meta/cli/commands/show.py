from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ...infrastructure.io.exceptions import MetadataReadError
from ...infrastructure.io.meta_xml.reader import read_module_metadata

console = Console()


@click.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
def show_command(files: tuple[Path, ...]) -> None:
    """Print the modules described by metadata FILES."""
    for path in files:
        try:
            details = read_module_metadata(path)
        except MetadataReadError as exc:
            raise click.ClickException(str(exc)) from exc

        table = Table(title=f"{details.name} ({details.module_type.label})")
        table.add_column("Property", style="cyan")
        table.add_column("Type")
        table.add_column("Default")
        table.add_column("Validation")
        for prop in details.properties:
            table.add_row(
                prop.name,
                prop.type,
                prop.default_value if prop.default_value is not None else "-",
                prop.validation_type or "-",
            )
        console.print(table, markup=False)
        console.print(f"Qualified name: {details.fully_qualified_name}", markup=False)
        console.print(f"Parent: {details.parent}", markup=False)
        keys = ", ".join(details.sorted_message_keys()) or "-"
        console.print(f"Message keys: {keys}", markup=False)
