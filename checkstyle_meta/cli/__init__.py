import click

from .commands.generate import generate_command
from .commands.show import show_command


@click.group()
def app() -> None:
    pass


app.add_command(generate_command, name="generate")
app.add_command(show_command, name="show")
__all__ = ["app"]
