"""
Trafexia CLI entry point.

Commands:
    analyze          Discover endpoint URLs in an APK/XAPK
    export-requests  Convert captured requests to a Postman collection
    categories       Show URL classification categories
"""
from typing import Optional

import click

from trafexia import __version__
from trafexia.cli.analyze import analyze_command
from trafexia.cli.categories import categories_command
from trafexia.cli.console import configure_logging
from trafexia.cli.export_requests import export_requests_command
from trafexia.config import load_settings


@click.group()
@click.version_option(__version__, prog_name='trafexia')
@click.option('--log-level', help='Override TRAFEXIA_LOG_LEVEL (DEBUG, INFO, WARNING, ...)')
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]):
    """Trafexia - static API endpoint discovery for Android packages"""
    settings = load_settings()
    if log_level:
        settings.log_level = log_level
    configure_logging(settings.level)
    ctx.obj = settings


cli.add_command(analyze_command)
cli.add_command(export_requests_command)
cli.add_command(categories_command)


def main():
    cli()


if __name__ == '__main__':
    main()
