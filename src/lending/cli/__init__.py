"""Main CLI application module."""

import typer

from .db_commands import db_app
from .list_commands import list_entities

app = typer.Typer(
    help="📚 Library lending service administration",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.command("list")(list_entities)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
