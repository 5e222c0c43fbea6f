"""Split URLs into Postman URL components.

decompose_url() never raises: it returns either UrlParts or a
UrlParseFailure describing why the text is not a usable absolute URL.
Callers pick their own fallback decomposition from the failure.
"""
import ipaddress
import re
from dataclasses import dataclass
from typing import List, Optional, Union
from urllib.parse import parse_qsl, urlsplit

from .collection import QueryParam, UrlParts

FALLBACK_PROTOCOL = 'http'

# Characters a host may never contain
_FORBIDDEN_HOST_CHARS = re.compile(r'[\s#%/:<>?@\[\\\]^|]')


@dataclass
class UrlParseFailure:
    """Returned instead of UrlParts when the URL cannot be parsed."""
    raw: str
    reason: str

    def fallback(self, host: Optional[str] = None, path: Optional[str] = None) -> UrlParts:
        """
        Degenerate decomposition: one host label and at most one path segment.

        Args:
            host: Host text to use as the single label (default: the raw URL)
            path: Path text to use as the single segment (default: no segment)
        """
        return UrlParts(
            raw=self.raw,
            protocol=FALLBACK_PROTOCOL,
            host=[self.raw if host is None else host],
            path=[] if path is None else [path],
            query=[],
        )


def decompose_url(url: str) -> Union[UrlParts, UrlParseFailure]:
    """
    Parse an absolute URL into protocol, host labels, path segments and query.

    Empty path segments are dropped. Query pairs keep their order and
    duplicate keys; blank values are kept.
    """
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
        parts.port  # raises ValueError for a malformed port
    except ValueError as e:
        return UrlParseFailure(raw=url, reason=str(e))

    if not parts.scheme:
        return UrlParseFailure(raw=url, reason='missing scheme')
    if not hostname:
        return UrlParseFailure(raw=url, reason='missing host')
    if parts.netloc.rpartition('@')[2].startswith('['):
        # IPv6 literal: one bracketed label, e.g. [2001:db8::1]
        try:
            host = [f"[{ipaddress.IPv6Address(hostname)}]"]
        except ValueError as e:
            return UrlParseFailure(raw=url, reason=str(e))
    elif _FORBIDDEN_HOST_CHARS.search(hostname):
        return UrlParseFailure(raw=url, reason=f"invalid host '{hostname}'")
    else:
        host = hostname.split('.')

    return UrlParts(
        raw=url,
        protocol=parts.scheme.lower(),
        host=host,
        path=split_path(parts.path),
        query=[QueryParam(key=k, value=v) for k, v in parse_qsl(parts.query, keep_blank_values=True)],
    )


def split_path(path: str) -> List[str]:
    """'/v1//cart/' -> ['v1', 'cart']"""
    return [p for p in path.split('/') if p]
