"""URL classification and Postman collection export"""
from .classifier import (
    CATEGORIES,
    UNCATEGORIZED,
    ClassificationResult,
    category_for,
    classify_urls,
)
from .capture import CapturedRequest, header_text, load_requests
from .collection import (
    POSTMAN_SCHEMA,
    CollectionDocument,
    FolderItem,
    Header,
    QueryParam,
    RawBody,
    RequestItem,
    UrlParts,
)
from .urlparts import UrlParseFailure, decompose_url
from .postman import (
    UNCATEGORIZED_FOLDER,
    build_request_collection,
    build_url_collection,
    detect_language,
    generate_collection_from_requests,
    generate_collection_from_urls,
)
