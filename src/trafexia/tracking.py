"""
CLI run tracking - logs every command execution with its outcome.

Each run gets a start record, then a success record with the tracker
summary and duration, or a failure record with the error.
"""
import logging
import os
import socket
import time
from contextlib import contextmanager
from typing import Any, Dict, Generator

logger = logging.getLogger(__name__)


def _get_context() -> Dict[str, str]:
    """Get execution context (hostname, username)."""
    return {
        'hostname': socket.gethostname(),
        'username': os.getenv('USER') or os.getenv('USERNAME') or 'unknown',
    }


def _format_summary(summary: Dict[str, Any]) -> str:
    return ', '.join(f"{k}={v}" for k, v in summary.items()) or '-'


@contextmanager
def track_run(command: str, args: Dict[str, Any]) -> Generator[Dict[str, Any], None, None]:
    """
    Context manager for tracking CLI command execution.

    Usage:
        with track_run('analyze', {'package': path}) as tracker:
            # do work...
            tracker['url_count'] = 42
        # Success or failure is logged on exit

    Exceptions are logged and re-raised.
    """
    ctx = _get_context()
    logger.info(f"Run started: {command} {_format_summary(args)} "
                f"(user={ctx['username']}, host={ctx['hostname']})")
    tracker: Dict[str, Any] = {}
    started = time.monotonic()

    try:
        yield tracker
    except Exception as e:
        duration_ms = int((time.monotonic() - started) * 1000)
        logger.error(f"Run failed: {command} after {duration_ms}ms: {e} "
                     f"[{_format_summary(tracker)}]")
        raise

    duration_ms = int((time.monotonic() - started) * 1000)
    logger.info(f"Run completed: {command} in {duration_ms}ms [{_format_summary(tracker)}]")
