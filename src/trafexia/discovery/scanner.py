"""Extract URL-like substrings from raw entry bytes.

Entries (dex, arsc, native libraries, ...) are treated as opaque blobs:
the buffer is decoded one byte per character so any byte sequence is
accepted, then scanned for scheme-qualified URLs.
"""
import re
from typing import Iterator, List

# Alphanumerics plus the unreserved/reserved URL punctuation
URL_PATTERN = re.compile(r"https?://[a-zA-Z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+")

# latin-1 maps every byte 0x00-0xff to exactly one code point and never fails
BINARY_ENCODING = 'latin-1'


def decode_binary(data: bytes) -> str:
    """Decode a buffer byte-for-byte into text."""
    return data.decode(BINARY_ENCODING)


def iter_url_matches(text: str) -> Iterator[str]:
    """
    Yield non-overlapping URL matches from left to right.

    Each search resumes at the end of the previous match, so a match never
    shares characters with the one before it.
    """
    pos = 0
    while True:
        match = URL_PATTERN.search(text, pos)
        if match is None:
            return
        yield match.group(0)
        pos = match.end()


def extract_urls(data: bytes) -> List[str]:
    """Return every URL-like substring found in a byte buffer, in order."""
    return list(iter_url_matches(decode_binary(data)))
