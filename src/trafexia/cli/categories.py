"""
Categories command - show the classification rules.
"""
import click
from rich.table import Table

from trafexia.cli.console import console
from trafexia.export import CATEGORIES, UNCATEGORIZED_FOLDER


@click.command('categories')
def categories_command():
    """List URL categories in priority order."""
    table = Table(title="URL Categories (first match wins)")
    table.add_column("#", justify="right")
    table.add_column("Category", style="bold")
    table.add_column("Keywords")

    for i, (name, keywords) in enumerate(CATEGORIES, 1):
        table.add_row(str(i), name, ', '.join(keywords))
    table.add_row('-', UNCATEGORIZED_FOLDER, '[muted](no keyword matched)[/]')

    console.print(table)
