
from __future__ import annotations

import typer

from family_tree.cli.commands.run import run_command

app = typer.Typer(
    name="family-tree",
    help="Interactive family tree record keeper with a centered generation view",
    add_completion=False,
)

app.command("run")(run_command)


@app.callback()
def callback():
    """
    Centered family tree console.
    """


def main():
    app()


if __name__ == "__main__":
    main()
