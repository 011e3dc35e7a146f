"""Database management CLI commands."""

import typer

from src.lending.core.services.database.db_manage import DbManageService
from src.lending.runtime.context import get_config

from .utils import bootstrap, console

db_app = typer.Typer(help="🗄️  Database commands")


@db_app.command("init")
def init_db() -> None:
    """Create every lending table in the configured database."""
    db_service = bootstrap()
    DbManageService(db_service.engine).create_all()
    console.print(
        f"[green]✅ Tables created in[/green] [cyan]{get_config().database.url}[/cyan]"
    )


@db_app.command("health")
def health() -> None:
    """Check that the configured database accepts connections."""
    db_service = bootstrap()
    if not db_service.health_check():
        console.print("[red]❌ Database is unreachable[/red]")
        raise typer.Exit(code=1)
    console.print("[green]✅ Database is reachable[/green]")
