"""Postman collection v2.1 document model.

Items are either requests or folders. Each dataclass renders itself with
to_dict(), building dicts in the key order Postman writes them, so the JSON
output is stable across runs.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..errors import SerializationError

POSTMAN_SCHEMA = 'https://schema.getpostman.com/json/collection/v2.1.0/collection.json'


@dataclass
class Header:
    key: str
    value: str

    def to_dict(self) -> dict:
        return {'key': self.key, 'value': self.value, 'type': 'text'}


@dataclass
class QueryParam:
    key: str
    value: str

    def to_dict(self) -> dict:
        return {'key': self.key, 'value': self.value}


@dataclass
class UrlParts:
    """Postman URL object: raw text plus its decomposition."""
    raw: str
    protocol: str
    host: List[str]
    path: List[str]
    query: List[QueryParam] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'raw': self.raw,
            'protocol': self.protocol,
            'host': list(self.host),
            'path': list(self.path),
            'query': [q.to_dict() for q in self.query],
        }


@dataclass
class RawBody:
    """Raw request body with its editor language tag."""
    raw: str
    language: str = 'text'

    def to_dict(self) -> dict:
        return {
            'mode': 'raw',
            'raw': self.raw,
            'options': {'raw': {'language': self.language}},
        }


@dataclass
class RequestItem:
    name: str
    method: str
    url: UrlParts
    headers: List[Header] = field(default_factory=list)
    body: Optional[RawBody] = None

    def to_dict(self) -> dict:
        request: Dict[str, Any] = {
            'method': self.method,
            'header': [h.to_dict() for h in self.headers],
            'url': self.url.to_dict(),
        }
        if self.body is not None:
            request['body'] = self.body.to_dict()
        return {'name': self.name, 'request': request, 'response': []}


@dataclass
class FolderItem:
    name: str
    items: List['Item'] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {'name': self.name, 'item': [i.to_dict() for i in self.items]}


Item = Union[RequestItem, FolderItem]


@dataclass
class CollectionDocument:
    name: str
    items: List[Item] = field(default_factory=list)
    schema: str = POSTMAN_SCHEMA

    def to_dict(self) -> dict:
        return {
            'info': {'name': self.name, 'schema': self.schema},
            'item': [i.to_dict() for i in self.items],
        }

    def to_json(self) -> str:
        """Serialize with 2-space indentation; same document, same bytes."""
        try:
            return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(self.name, str(e), e) from e
