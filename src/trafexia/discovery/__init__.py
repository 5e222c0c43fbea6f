"""Static endpoint discovery in APK/XAPK packages"""
from .scanner import extract_urls, iter_url_matches, URL_PATTERN
from .filters import is_candidate_url, rejection_reason, DOMAIN_BLACKLIST, ASSET_EXTENSIONS
from .containers import ArchiveEntry, ZipContainer, container_label, open_container
from .walker import (
    ApkAnalyzer,
    AnalysisReport,
    ResultSet,
    WalkIssue,
    analyze_archive,
    analyze_bytes,
    SCAN_EXTENSIONS,
)
