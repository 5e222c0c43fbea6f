"""Keyword classification of discovered URLs into API categories.

Categories are tried in declaration order and the first keyword hit wins,
so the order of CATEGORIES is the priority order. A URL that matches no
category lands in the Uncategorized bucket, which always comes last.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

UNCATEGORIZED = 'Uncategorized'

# (category name, keyword substrings) in priority order
CATEGORIES: List[Tuple[str, List[str]]] = [
    ('Authentication & User', ['auth', 'login', 'logout', 'register', 'signin', 'signup',
                               'user', 'profile', 'account', 'token', 'otp', 'password']),
    ('Product & Catalog', ['product', 'sku', 'category', 'catalog', 'search', 'find',
                           'item', 'detail', 'listing']),
    ('Cart & Checkout', ['cart', 'basket', 'checkout', 'add-to-cart', 'remove',
                         'shipping', 'delivery']),
    ('Order & Payment', ['order', 'pay', 'payment', 'transaction', 'invoice', 'billing',
                         'receipt', 'history', 'purchase']),
    ('Promotion & Voucher', ['promo', 'coupon', 'voucher', 'discount', 'campaign',
                             'reward', 'offer', 'gift']),
    ('Notification & Message', ['notify', 'notification', 'message', 'inbox', 'chat',
                                'push', 'alert']),
    ('Config & Settings', ['config', 'setting', 'pref', 'feature', 'version', 'update',
                           'meta', 'system']),
    ('Upload & Media', ['upload', 'file', 'image', 'video', 'cloud', 'storage', 'cdn',
                        'media']),
    ('Location & Map', ['geo', 'location', 'map', 'place', 'address', 'city', 'country',
                        'region']),
]

Categories = Sequence[Tuple[str, Sequence[str]]]


@dataclass
class ClassificationResult:
    """Category name -> URLs, in category order with Uncategorized last."""
    buckets: Dict[str, List[str]] = field(default_factory=dict)

    def non_empty(self) -> List[Tuple[str, List[str]]]:
        """Buckets that received at least one URL, in priority order."""
        return [(name, urls) for name, urls in self.buckets.items() if urls]

    def category_of(self, url: str) -> Optional[str]:
        for name, urls in self.buckets.items():
            if url in urls:
                return name
        return None

    def counts(self) -> Dict[str, int]:
        return {name: len(urls) for name, urls in self.buckets.items()}


def _match(lower_url: str, categories: Categories) -> str:
    for name, keywords in categories:
        if any(k in lower_url for k in keywords):
            return name
    return UNCATEGORIZED


def category_for(url: str, categories: Categories = CATEGORIES) -> str:
    """Return the single category a URL belongs to."""
    return _match(url.lower(), categories)


def classify_urls(urls: Iterable[str], categories: Categories = CATEGORIES) -> ClassificationResult:
    """
    Group URLs by the first category whose keywords appear in them.

    Args:
        urls: URLs in the order they should appear within each bucket
        categories: (name, keywords) pairs in priority order

    Returns:
        ClassificationResult with one bucket per category plus Uncategorized
    """
    buckets: Dict[str, List[str]] = {name: [] for name, _ in categories}
    buckets[UNCATEGORIZED] = []

    for url in urls:
        buckets[_match(url.lower(), categories)].append(url)

    logger.debug(f"Classified URLs: {', '.join(f'{k}={len(v)}' for k, v in buckets.items() if v)}")
    return ClassificationResult(buckets=buckets)
