"""
Analyze command - discover API endpoints inside an APK/XAPK.
"""
import sys
from typing import Optional

import click
from rich.markup import escape
from rich.table import Table

from trafexia.cli.console import console
from trafexia.cli.helpers import resolve_output_path, write_collection
from trafexia.config import Settings
from trafexia.discovery import AnalysisReport, ApkAnalyzer
from trafexia.errors import ContainerOpenError, SerializationError
from trafexia.export import build_url_collection, classify_urls
from trafexia.tracking import track_run


@click.command('analyze')
@click.argument('package', type=click.Path(dir_okay=False))
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Write the Postman collection to this file')
@click.option('--save', is_flag=True, help='Write the collection to the output directory using its name')
@click.option('--name', help='Collection name (default: TRAFEXIA_STATIC_EXPORT_NAME)')
@click.option('--print-json', is_flag=True, help='Print the collection JSON instead of the URL table')
@click.option('--plain', is_flag=True, help='Print one URL per line')
@click.pass_obj
def analyze_command(settings: Settings, package: str, output: Optional[str], save: bool,
                    name: Optional[str], print_json: bool, plain: bool):
    """
    Statically extract endpoint URLs from PACKAGE.

    Scans dex, resource, XML, native library, JS and JSON entries, including
    those inside nested split APKs, and groups the results by API category.
    """
    name = name or settings.static_export_name
    try:
        with track_run('analyze', {'package': package, 'name': name}) as tracker:
            _analyze_impl(settings, package, output, save, name, print_json, plain, tracker)
    except (ContainerOpenError, SerializationError) as e:
        console.print(f"[error]{escape(str(e))}[/]")
        sys.exit(1)


def _analyze_impl(settings: Settings, package: str, output: Optional[str], save: bool,
                  name: str, print_json: bool, plain: bool, tracker: dict):
    """Implementation of analyze command."""
    quiet = plain or print_json

    if quiet:
        report = ApkAnalyzer().analyze_report(package)
    else:
        console.print(f"\n[info]Analyzing:[/] {escape(package)}\n")
        with console.status("Scanning package entries..."):
            report = ApkAnalyzer().analyze_report(package)

    tracker['url_count'] = len(report.urls)
    tracker['issue_count'] = len(report.issues)

    document = build_url_collection(report.urls, name)
    text = document.to_json()
    tracker['folder_count'] = len(document.items)

    if plain:
        for url in report.urls:
            click.echo(url)
    elif print_json:
        click.echo(text)
    else:
        _print_report(report)

    if output or save:
        path = write_collection(resolve_output_path(output, name, settings.output_dir), text)
        tracker['output'] = str(path)
        if not quiet:
            console.print(f"\n[success]Collection saved:[/] {escape(str(path))}")


def _print_report(report: AnalysisReport):
    if not report.urls:
        console.print("[warning]No endpoint URLs found[/]")
    else:
        classification = classify_urls(report.urls)

        table = Table(title=f"Discovered Endpoints ({len(report.urls)})")
        table.add_column("Category", style="category")
        table.add_column("URL", overflow="fold")

        for category, urls in classification.non_empty():
            for url in urls:
                table.add_row(category, escape(url))

        console.print(table)

    console.print(
        f"[muted]{report.entries_scanned} entries scanned in "
        f"{report.containers_visited} container(s)[/]"
    )

    if report.issues:
        console.print(f"\n[warning]Skipped {len(report.issues)} item(s) - results may be partial:[/]")
        for issue in report.issues:
            console.print(f"  [warning]![/] {escape(issue.path)}: {escape(issue.message)} [muted]({issue.kind})[/]")
