"""Zip container access for APK/XAPK packages.

The walker only needs open(source) -> container and container.entries();
ZipContainer provides that on top of the standard library zipfile module.
"""
import io
import os
import zipfile
from dataclasses import dataclass
from typing import Callable, Iterator, Protocol, Union

from ..errors import ContainerOpenError

ContainerSource = Union[str, os.PathLike, bytes]


@dataclass
class ArchiveEntry:
    """One member of a container. Read once during a walk."""
    name: str
    is_directory: bool
    _reader: Callable[[], bytes]

    def read_bytes(self) -> bytes:
        """Materialize the (decompressed) entry content."""
        return self._reader()


class Container(Protocol):
    def entries(self) -> Iterator[ArchiveEntry]:
        ...

    def close(self) -> None:
        ...


class ZipContainer:
    """Zip-format container opened from a path or an in-memory buffer."""

    def __init__(self, archive: zipfile.ZipFile, label: str):
        self._archive = archive
        self.label = label

    def entries(self) -> Iterator[ArchiveEntry]:
        for info in self._archive.infolist():
            yield ArchiveEntry(
                name=info.filename,
                is_directory=info.is_dir(),
                _reader=lambda info=info: self._archive.read(info),
            )

    def close(self) -> None:
        self._archive.close()

    def __enter__(self) -> 'ZipContainer':
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def container_label(source: ContainerSource) -> str:
    """Display name for a source: its path, or its size for in-memory data."""
    if isinstance(source, (bytes, bytearray)):
        return f"<{len(source)} bytes>"
    return os.fspath(source)


def open_container(source: ContainerSource) -> ZipContainer:
    """
    Open a zip container from a file path or raw bytes.

    Raises:
        ContainerOpenError: if the source is missing or not a zip archive.
    """
    label = container_label(source)
    if isinstance(source, (bytes, bytearray)):
        handle = io.BytesIO(source)
    else:
        handle = label

    try:
        archive = zipfile.ZipFile(handle)
    except (zipfile.BadZipFile, OSError, ValueError) as e:
        raise ContainerOpenError(label, str(e)) from e

    return ZipContainer(archive, label)


ContainerOpener = Callable[[ContainerSource], Container]
