"""File name sanitization for exported collections"""
import re

# Postman's own export suffix
COLLECTION_SUFFIX = '.postman_collection.json'

MAX_NAME_LENGTH = 100


def sanitize_name(name: str) -> str:
    """
    Convert a collection name to a safe file name stem.

    - Replace spaces/special chars with underscores
    - Remove consecutive underscores
    - Strip leading/trailing underscores and dots
    - Truncate to 100 chars
    """
    if not name:
        return "collection"

    # Replace separators and anything path-like with underscore
    result = re.sub(r'[\s/\\:*?"<>|&]+', '_', name)

    # Remove any remaining characters outside a portable set
    result = re.sub(r'[^A-Za-z0-9_.\-]', '', result)

    # Collapse multiple underscores
    result = re.sub(r'_+', '_', result)

    result = result.strip('_.')

    if len(result) > MAX_NAME_LENGTH:
        result = result[:MAX_NAME_LENGTH].rstrip('_.')

    return result or "collection"


def make_collection_filename(name: str) -> str:
    """
    Create a file name for a collection export.

    Example: make_collection_filename("Trafexia Static Analysis")
        -> "Trafexia_Static_Analysis.postman_collection.json"
    """
    return f"{sanitize_name(name)}{COLLECTION_SUFFIX}"
