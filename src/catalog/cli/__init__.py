"""Main CLI application module."""

import typer

from .catalog_commands import categories_app, db_app, products_app, serve

app = typer.Typer(
    help="Catalog service administration",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.add_typer(categories_app, name="categories")
app.add_typer(products_app, name="products")
app.command("serve")(serve)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
