"""
Trafexia CLI module - shared console and commands.
"""
from trafexia.cli.console import console, custom_theme, configure_logging
from trafexia.cli.helpers import (
    resolve_output_path,
    write_collection,
    read_captured_requests,
)
from trafexia.cli.analyze import analyze_command
from trafexia.cli.export_requests import export_requests_command
from trafexia.cli.categories import categories_command

__all__ = [
    'console',
    'custom_theme',
    'configure_logging',
    'resolve_output_path',
    'write_collection',
    'read_captured_requests',
    'analyze_command',
    'export_requests_command',
    'categories_command',
]
