"""Build Postman collections from captured traffic or discovered URLs.

Two entry points:
- generate_collection_from_requests: one request per captured request
- generate_collection_from_urls: GET requests grouped into category folders

Both return the JSON text of the collection.
"""
import logging
from typing import Iterable, List

from ..config import DEFAULT_EXPORT_NAME, DEFAULT_STATIC_EXPORT_NAME
from .capture import CapturedRequest, header_text
from .classifier import CATEGORIES, UNCATEGORIZED, Categories, classify_urls
from .collection import CollectionDocument, FolderItem, Header, RawBody, RequestItem, UrlParts
from .urlparts import UrlParseFailure, decompose_url

logger = logging.getLogger(__name__)

# Folder label shown for URLs that matched no category
UNCATEGORIZED_FOLDER = 'Other APIs'

# (content-type substring, body language), first match wins
CONTENT_TYPE_LANGUAGES = [
    ('application/json', 'json'),
    ('application/xml', 'xml'),
    ('text/html', 'html'),
    ('javascript', 'javascript'),
]


def detect_language(content_type: str) -> str:
    """Map a Content-Type header value to a Postman raw body language."""
    lower = content_type.lower()
    for marker, language in CONTENT_TYPE_LANGUAGES:
        if marker in lower:
            return language
    return 'text'


def request_to_item(req: CapturedRequest) -> RequestItem:
    """Convert a captured request into a Postman request item."""
    url = decompose_url(req.url)
    if isinstance(url, UrlParseFailure):
        logger.debug(f"Unparseable URL {req.url!r} ({url.reason}), using host/path as-is")
        url = url.fallback(host=req.host, path=req.path)

    headers = [Header(key=key, value=header_text(value)) for key, value in req.request_headers.items()]

    body = None
    if req.request_body:
        body = RawBody(raw=req.request_body, language=detect_language(req.header('content-type')))

    return RequestItem(
        name=f"{req.method} {req.path}",
        method=req.method,
        url=url,
        headers=headers,
        body=body,
    )


def url_to_item(url: str) -> RequestItem:
    """GET request item for a discovered URL, named after its path."""
    parts = decompose_url(url)
    if isinstance(parts, UrlParseFailure):
        parts = parts.fallback()

    return RequestItem(
        name=_item_name(parts),
        method='GET',
        url=parts,
    )


def _item_name(parts: UrlParts) -> str:
    if parts.path:
        return '/' + '/'.join(parts.path)
    return parts.raw


def build_request_collection(requests: Iterable[CapturedRequest],
                             name: str = DEFAULT_EXPORT_NAME) -> CollectionDocument:
    return CollectionDocument(name=name, items=[request_to_item(r) for r in requests])


def build_url_collection(urls: Iterable[str], name: str = DEFAULT_STATIC_EXPORT_NAME,
                         categories: Categories = CATEGORIES) -> CollectionDocument:
    """
    Classify URLs and wrap each non-empty category in a folder.

    Folder order follows category priority; the Uncategorized bucket comes
    last as "Other APIs" and is left out when empty.
    """
    classification = classify_urls(urls, categories)

    folders: List[FolderItem] = []
    for category, members in classification.non_empty():
        label = UNCATEGORIZED_FOLDER if category == UNCATEGORIZED else category
        folders.append(FolderItem(name=label, items=[url_to_item(u) for u in members]))

    return CollectionDocument(name=name, items=folders)


def generate_collection_from_requests(requests: Iterable[CapturedRequest],
                                      name: str = DEFAULT_EXPORT_NAME) -> str:
    """Postman collection JSON for captured requests."""
    return build_request_collection(requests, name).to_json()


def generate_collection_from_urls(urls: Iterable[str],
                                  name: str = DEFAULT_STATIC_EXPORT_NAME) -> str:
    """Postman collection JSON for statically discovered URLs."""
    return build_url_collection(urls, name).to_json()
