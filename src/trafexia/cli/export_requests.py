"""
Export command - turn captured traffic into a Postman collection.
"""
import sys
from typing import Optional

import click
from rich.markup import escape

from trafexia.cli.console import console
from trafexia.cli.helpers import read_captured_requests, resolve_output_path, write_collection
from trafexia.config import Settings
from trafexia.errors import SerializationError
from trafexia.export import generate_collection_from_requests
from trafexia.tracking import track_run


@click.command('export-requests')
@click.argument('capture_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Collection file to write')
@click.option('--name', help='Collection name (default: TRAFEXIA_EXPORT_NAME)')
@click.option('--stdout', 'to_stdout', is_flag=True, help='Print the collection JSON instead of writing a file')
@click.pass_obj
def export_requests_command(settings: Settings, capture_file: str, output: Optional[str],
                            name: Optional[str], to_stdout: bool):
    """
    Convert CAPTURE_FILE (JSON array of captured requests) to a Postman collection.
    """
    name = name or settings.export_name
    try:
        with track_run('export-requests', {'capture_file': capture_file, 'name': name}) as tracker:
            _export_impl(settings, capture_file, output, name, to_stdout, tracker)
    except SerializationError as e:
        console.print(f"[error]{escape(str(e))}[/]")
        sys.exit(1)


def _export_impl(settings: Settings, capture_file: str, output: Optional[str],
                 name: str, to_stdout: bool, tracker: dict):
    """Implementation of export-requests command."""
    requests = read_captured_requests(capture_file)
    tracker['request_count'] = len(requests)

    text = generate_collection_from_requests(requests, name)

    if to_stdout:
        click.echo(text)
        return

    path = write_collection(resolve_output_path(output, name, settings.output_dir), text)
    tracker['output'] = str(path)
    console.print(f"[success]Exported {len(requests)} request(s) to[/] {escape(str(path))}")
