"""Catalog administration commands: schema setup, listings and lifecycle actions."""

from collections.abc import Callable
from decimal import Decimal

import typer
from rich.console import Console
from rich.table import Table

from src.catalog.core.models import CategoryView, ProductView
from src.catalog.core.services import (
    CatalogProjectionService,
    CategoryLifecycleManager,
    DbManageService,
    DbSessionService,
    ProductLifecycleManager,
)
from src.catalog.core.services.catalog.errors import CatalogError
from src.catalog.runtime.context import get_config

console = Console()

db_app = typer.Typer(help="Manage the catalog database schema")
categories_app = typer.Typer(help="Inspect and manage categories")
products_app = typer.Typer(help="Inspect and manage products")


def get_database_service() -> DbSessionService:
    return DbSessionService()


def _run_command(action: Callable[[], None], success: str) -> None:
    try:
        action()
    except CatalogError as e:
        console.print(f"[red]❌ {e.message}[/red] [dim]({e.code})[/dim]")
        raise typer.Exit(code=1) from e
    console.print(f"[green]✅ {success}[/green]")


def _category_table(views: list[CategoryView], title: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Description")
    table.add_column("Active products", justify="right")
    table.add_column("Status", style="yellow")
    for view in views:
        table.add_row(
            str(view.id),
            view.name,
            view.description or "",
            str(view.active_product_count),
            view.status.value,
        )
    return table


def _product_table(views: list[ProductView], title: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Price", justify="right")
    table.add_column("Stock", justify="right")
    table.add_column("Stock status", style="yellow")
    for view in views:
        table.add_row(
            str(view.id),
            view.name,
            view.category_name or "",
            view.formatted_price,
            str(view.stock),
            view.stock_status.value,
        )
    return table


@db_app.command("init")
def init_database() -> None:
    """Create the catalog tables and indexes if they do not exist."""
    database_service = get_database_service()
    try:
        DbManageService(database_service.engine).create_all()
    finally:
        database_service.dispose()
    console.print("[green]✅ Database initialized[/green]")


@categories_app.command("list")
def list_categories(
    name: str | None = typer.Option(None, "--name", "-n", help="Case-insensitive name fragment"),
    deleted: bool = typer.Option(False, "--deleted", help="List deleted categories instead"),
) -> None:
    """List active (or deleted) categories."""
    projections = CatalogProjectionService(get_database_service())
    if deleted:
        views = projections.list_deleted_categories()
        title = "Deleted categories"
    else:
        views = projections.list_categories(name_contains=name)
        title = "Categories"

    if not views:
        console.print("[yellow]No categories found[/yellow]")
        return
    console.print(_category_table(views, title))


@categories_app.command("delete")
def delete_category(category_id: int = typer.Argument(..., help="Category ID")) -> None:
    """Soft-delete a category that has no active products."""
    manager = CategoryLifecycleManager(get_database_service())
    _run_command(lambda: manager.delete(category_id), f"Category {category_id} deleted")


@categories_app.command("restore")
def restore_category(category_id: int = typer.Argument(..., help="Category ID")) -> None:
    """Restore a deleted category."""
    manager = CategoryLifecycleManager(get_database_service())
    _run_command(lambda: manager.restore(category_id), f"Category {category_id} restored")


@products_app.command("list")
def list_products(
    name: str | None = typer.Option(None, "--name", "-n", help="Case-insensitive name fragment"),
    category_id: int | None = typer.Option(None, "--category", "-c", help="Category ID"),
    min_price: float | None = typer.Option(None, "--min-price", help="Inclusive lower bound"),
    max_price: float | None = typer.Option(None, "--max-price", help="Inclusive upper bound"),
    stock_above: int | None = typer.Option(None, "--stock-above", help="Stock strictly above"),
    deleted: bool = typer.Option(False, "--deleted", help="List deleted products instead"),
) -> None:
    """List active (or deleted) products."""
    projections = CatalogProjectionService(get_database_service())
    if deleted:
        views = projections.list_deleted_products()
        title = "Deleted products"
    else:
        views = projections.list_products(
            name_contains=name,
            category_id=category_id,
            min_price=Decimal(str(min_price)) if min_price is not None else None,
            max_price=Decimal(str(max_price)) if max_price is not None else None,
            stock_above=stock_above,
        )
        title = "Products"

    if not views:
        console.print("[yellow]No products found[/yellow]")
        return
    console.print(_product_table(views, title))


@products_app.command("delete")
def delete_product(product_id: int = typer.Argument(..., help="Product ID")) -> None:
    """Soft-delete a product."""
    manager = ProductLifecycleManager(get_database_service())
    _run_command(lambda: manager.delete(product_id), f"Product {product_id} deleted")


@products_app.command("restore")
def restore_product(product_id: int = typer.Argument(..., help="Product ID")) -> None:
    """Restore a deleted product whose category is active."""
    manager = ProductLifecycleManager(get_database_service())
    _run_command(lambda: manager.restore(product_id), f"Product {product_id} restored")


def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (default from config)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port (default from config)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the catalog HTTP API with uvicorn."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "src.catalog.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
    )
