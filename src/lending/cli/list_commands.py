"""Read-only listing of active records."""

from enum import Enum

import typer
from rich.table import Table

from src.lending.core.errors import LendingError
from src.lending.core.services import (
    BookService,
    CategoryService,
    LendbookService,
    UserService,
)
from src.lending.core.services.base import EntityService

from .utils import bootstrap, console


class EntityKind(str, Enum):
    books = "books"
    categories = "categories"
    users = "users"
    lendbooks = "lendbooks"


_SERVICES: dict[EntityKind, type[EntityService]] = {
    EntityKind.books: BookService,
    EntityKind.categories: CategoryService,
    EntityKind.users: UserService,
    EntityKind.lendbooks: LendbookService,
}

_COLUMNS: dict[EntityKind, tuple[str, ...]] = {
    EntityKind.books: ("id", "name", "description", "category_id"),
    EntityKind.categories: ("id", "name"),
    EntityKind.users: ("id", "name", "email"),
    EntityKind.lendbooks: ("id", "book_id", "user_id", "created_at"),
}


def list_entities(
    kind: EntityKind = typer.Argument(..., help="Which records to list"),
) -> None:
    """List active (not soft-deleted) records."""
    db_service = bootstrap()
    try:
        with db_service.session_scope() as session:
            records = _SERVICES[kind](session).find_all()
    except LendingError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e

    if not records:
        console.print(f"[yellow]📭 No {kind.value} found[/yellow]")
        return

    columns = _COLUMNS[kind]
    table = Table(show_header=True, header_style="bold blue")
    for column in columns:
        table.add_column(column, style="cyan" if column == "id" else None, no_wrap=column == "id")
    for record in records:
        table.add_row(*(str(getattr(record, column) or "") for column in columns))

    console.print(table)
    console.print(f"\n[dim]Total: {len(records)} {kind.value}[/dim]")
