"""Captured HTTP requests handed to the exporter by the traffic recorder"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def header_text(value: Any) -> str:
    """
    Render a header value the way the recorder (JavaScript) stringifies it.

    Examples: True -> "true", None -> "null", 2.0 -> "2", "gzip" -> "gzip"
    """
    if isinstance(value, str):
        return value
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class CapturedRequest:
    """One recorded request"""
    method: str                     # "POST"
    url: str                        # Full URL as sent
    host: str                       # "api.example-shop.com"
    path: str                       # "/v1/cart/add"
    request_headers: Dict[str, str] = field(default_factory=dict)  # in capture order
    request_body: Optional[str] = None

    def header(self, name: str, default: str = '') -> str:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.request_headers.items():
            if key.lower() == wanted:
                return header_text(value)
        return default

    def to_dict(self) -> dict:
        return {
            'method': self.method,
            'url': self.url,
            'host': self.host,
            'path': self.path,
            'requestHeaders': dict(self.request_headers),
            'requestBody': self.request_body,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'CapturedRequest':
        # Recorder exports use camelCase keys
        return cls(
            method=data.get('method', 'GET'),
            url=data['url'],
            host=data.get('host', ''),
            path=data.get('path', ''),
            request_headers=dict(data.get('requestHeaders') or {}),
            request_body=data.get('requestBody'),
        )


def load_requests(items: List[dict]) -> List[CapturedRequest]:
    """Build CapturedRequest objects from a decoded JSON array."""
    return [CapturedRequest.from_dict(item) for item in items]
