"""Noise filter for extracted URL candidates.

Packages are full of schema namespaces, SDK documentation links, ad and
analytics endpoints and static asset URLs. Every stage below must pass for
a candidate to be kept. Some genuine endpoints are lost when they happen to
contain a blacklisted substring.
"""
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

MIN_URL_LENGTH = 10

# No spaces or characters that never appear in real endpoints
_FORBIDDEN_CHARS = re.compile(r'[<>{}\\^`\s]')

# Trackers, ads, infrastructure and default Android/SDK references.
# Matched as plain substrings anywhere in the URL.
DOMAIN_BLACKLIST = [
    'schemas.android.com',
    'www.w3.org',
    'xml.org',
    'example.com',
    'google.com/android',
    'apache.org',
    'github.com',
    'googlesyndication.com',
    'doubleclick.net',
    'facebook.com',
    'google-analytics.com',
    'adjust.io',
    'appsflyer.com',
    'crashlytics.com',
    'googleapis.com',
    'googleadservices.com',
    'googletagmanager.com',
    'facebook.net',
    'twitter.com',
    'linkedin.com',
    'instagram.com',
    'pinterest.com',
    'youtube.com',
    'youtu.be',
    'play.google.com',
    'support.google.com',
    'policies.google.com',
    'developer.android.com',
    'android.googlesource.com',
    'unity3d.com',
    'unity.com',
    'adobe.com',
    'macromedia.com',
    'microsoft.com',
    'apple.com',
    'schema.org',
    'xmlns.com',
    'gstatic.com',
    'g.co',
    'goo.gl',
    'bit.ly',
    'aka.ms',
    'amzn.to',
]

# Internal test/debug hosts
LOOPBACK_MARKERS = ['localhost', '127.0.0.1']

# Static assets, web views and bundled packages
ASSET_EXTENSIONS = [
    '.png', '.jpg', '.jpeg', '.gif', '.svg', '.webp', '.ico',
    '.ttf', '.otf', '.woff', '.woff2', '.eot',
    '.css', '.html', '.js', '.json', '.xml',
    '.mp3', '.mp4', '.wav', '.mov',
    '.zip', '.pdf', '.apk',
]


def rejection_reason(url: str) -> Optional[str]:
    """
    Run the filter stages in order and name the first one that fails.

    Returns:
        None if the candidate is accepted, otherwise one of
        'too_short', 'no_dot', 'bad_chars', 'blacklisted', 'loopback',
        'asset_extension'.
    """
    if len(url) < MIN_URL_LENGTH:
        return 'too_short'
    if '.' not in url:
        return 'no_dot'
    if _FORBIDDEN_CHARS.search(url):
        return 'bad_chars'
    if any(domain in url for domain in DOMAIN_BLACKLIST):
        return 'blacklisted'
    if any(marker in url for marker in LOOPBACK_MARKERS):
        return 'loopback'

    lower = url.lower()
    if any(lower.endswith(ext) for ext in ASSET_EXTENSIONS):
        return 'asset_extension'

    return None


def is_candidate_url(url: str) -> bool:
    """True if the URL passes every filter stage."""
    reason = rejection_reason(url)
    if reason is not None:
        logger.debug(f"Rejected ({reason}): {url[:120]}")
        return False
    return True
