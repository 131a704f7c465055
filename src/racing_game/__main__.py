from __future__ import annotations

from importlib.metadata import version as dist_version

import typer

from racing_game.cli.commands.race import race

app = typer.Typer(help="Turn-based text car race.", no_args_is_help=True)
app.command(name="race")(race)


@app.command()
def version():
    """Print the installed version."""
    typer.echo(dist_version("racing-game"))


def main():
    app()


if __name__ == "__main__":
    main()
