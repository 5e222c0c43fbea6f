"""
ApkAnalyzer - walks APK/XAPK containers and collects candidate endpoints.

Handles:
- Plain APKs (dex, resources.arsc, XML, native libraries, bundled JS/JSON)
- XAPK/APKS bundles whose split APKs are nested zip containers

Nested packages are read into memory, reopened and walked recursively so
all URLs land in one result set. Only a failure to open the outer package
aborts the analysis; anything below it is logged, recorded as an issue and
skipped.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

from ..errors import ContainerOpenError, EntryReadError, NestedContainerError
from .containers import (
    Container,
    ContainerOpener,
    ContainerSource,
    container_label,
    open_container,
)
from .filters import is_candidate_url
from .scanner import extract_urls

logger = logging.getLogger(__name__)

# Entry suffixes (lower-case) that are recursed into as nested packages
NESTED_PACKAGE_EXTENSION = '.apk'

# Compiled code, resource table, markup, native libraries, scripts, data
SCAN_EXTENSIONS = ('.dex', '.arsc', '.xml', '.so', '.js', '.json')

# Separator between a nested package and the entry inside it in issue paths
NESTED_PATH_SEPARATOR = '!/'


class ResultSet:
    """Unique accepted URLs for one analysis, finalized in sorted order."""

    def __init__(self, urls: Optional[Iterable[str]] = None):
        self._urls: Set[str] = set(urls or [])

    def add(self, url: str) -> bool:
        """Add a URL. Returns True if it was not already present."""
        if url in self._urls:
            return False
        self._urls.add(url)
        return True

    def __contains__(self, url: str) -> bool:
        return url in self._urls

    def __len__(self) -> int:
        return len(self._urls)

    def finalize(self) -> List[str]:
        """Return the URLs in lexicographic order."""
        return sorted(self._urls)


@dataclass
class WalkIssue:
    """A recoverable problem met while walking a container."""
    path: str       # e.g. "split_config.apk!/classes.dex"
    kind: str       # NestedContainerError or EntryReadError
    message: str


@dataclass
class AnalysisReport:
    """Outcome of one package analysis."""
    source: str
    urls: List[str] = field(default_factory=list)
    issues: List[WalkIssue] = field(default_factory=list)
    entries_scanned: int = 0
    containers_visited: int = 0

    @property
    def is_partial(self) -> bool:
        return bool(self.issues)


class ApkAnalyzer:
    """
    Static URL discovery over zip-format Android packages.

    Each call to analyze() uses fresh state, so one analyzer can be reused
    for many packages. The walk is synchronous; there is no limit on
    nesting depth or total size beyond what the package itself contains.
    """

    def __init__(self, opener: ContainerOpener = open_container):
        self._opener = opener

    def analyze(self, source: ContainerSource) -> List[str]:
        """Return the sorted, unique URLs found in a package."""
        return self.analyze_report(source).urls

    def analyze_report(self, source: ContainerSource) -> AnalysisReport:
        """
        Analyze a package and return URLs together with walk diagnostics.

        Raises:
            ContainerOpenError: if the outer package cannot be opened.
        """
        label = container_label(source)
        logger.info(f"Analyzing package: {label}")

        container = self._opener(source)
        report = AnalysisReport(source=label)
        results = ResultSet()
        try:
            self._process_container(container, '', results, report)
        finally:
            container.close()

        report.urls = results.finalize()
        logger.info(
            f"Found {len(report.urls)} URLs in {report.entries_scanned} entries "
            f"({report.containers_visited} containers, {len(report.issues)} skipped)"
        )
        return report

    def _process_container(self, container: Container, prefix: str,
                           results: ResultSet, report: AnalysisReport) -> None:
        report.containers_visited += 1

        for entry in container.entries():
            if entry.is_directory:
                continue

            name = entry.name.lower()
            entry_path = f"{prefix}{entry.name}"

            if name.endswith(NESTED_PACKAGE_EXTENSION):
                self._process_nested(entry, entry_path, results, report)
                continue

            if not name.endswith(SCAN_EXTENSIONS):
                continue

            try:
                data = entry.read_bytes()
            except Exception as e:
                self._record(report, EntryReadError(entry_path, str(e)))
                continue

            report.entries_scanned += 1
            for url in extract_urls(data):
                if is_candidate_url(url):
                    results.add(url)

    def _process_nested(self, entry, entry_path: str,
                        results: ResultSet, report: AnalysisReport) -> None:
        """Flatten a nested package into the current walk."""
        try:
            nested = self._opener(entry.read_bytes())
        except ContainerOpenError as e:
            self._record(report, NestedContainerError(entry_path, e.reason))
            return
        except Exception as e:
            self._record(report, NestedContainerError(entry_path, str(e)))
            return

        logger.debug(f"Descending into nested package: {entry_path}")
        try:
            self._process_container(nested, entry_path + NESTED_PATH_SEPARATOR, results, report)
        finally:
            nested.close()

    @staticmethod
    def _record(report: AnalysisReport, error: Exception) -> None:
        logger.warning(str(error))
        report.issues.append(WalkIssue(
            path=error.entry_path,
            kind=type(error).__name__,
            message=error.reason,
        ))


def analyze_archive(source: ContainerSource) -> List[str]:
    """Analyze an APK/XAPK at a path (or in memory) and return sorted URLs."""
    return ApkAnalyzer().analyze(source)


def analyze_bytes(data: bytes) -> List[str]:
    """Analyze an in-memory package."""
    return ApkAnalyzer().analyze(bytes(data))
