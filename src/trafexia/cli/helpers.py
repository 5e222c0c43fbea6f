"""
Shared utility functions for Trafexia CLI commands.
"""
import json
from pathlib import Path
from typing import List, Optional

import click

from trafexia.export import CapturedRequest, load_requests
from trafexia.utils import make_collection_filename


def resolve_output_path(output: Optional[str], name: str, output_dir: str) -> Path:
    """Explicit --output wins; otherwise derive the file name from the collection name."""
    if output:
        return Path(output)
    return Path(output_dir) / make_collection_filename(name)


def write_collection(path: Path, text: str) -> Path:
    """Write collection JSON, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + '\n', encoding='utf-8')
    return path


def read_captured_requests(path: str) -> List[CapturedRequest]:
    """
    Load a capture file: a JSON array of request objects, or an object
    with a "requests" array.
    """
    try:
        data = json.loads(Path(path).read_text(encoding='utf-8'))
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise click.ClickException(f"{path} is not valid JSON: {e}")

    if isinstance(data, dict):
        data = data.get('requests', [])
    if not isinstance(data, list):
        raise click.ClickException(f"{path} must contain a JSON array of requests")

    try:
        return load_requests(data)
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        raise click.ClickException(f"{path} has a malformed request entry: {e}")
