"""Pytest configuration and shared package fixtures for the Trafexia test suite."""

import io
import zipfile
from typing import Dict

import pytest

API_URL = 'https://api.example-shop.com/v1/cart/add?x=1'
AUTH_URL = 'https://auth.example-shop.com/login'


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests that exercise the full walk over real zip files"
    )


def build_zip(entries: Dict[str, bytes]) -> bytes:
    """Create an in-memory zip with the given entry names and contents."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
    return buffer.getvalue()


@pytest.fixture
def make_zip():
    return build_zip


@pytest.fixture
def shop_package_bytes() -> bytes:
    """
    XAPK-style package:
    - classes.dex with one real endpoint and two Google API references
    - assets/icon.png (not scanned)
    - split.apk (nested) with res/values/strings.xml holding the login URL
    """
    dex = (
        b'dex\n035\x00\x00\x01\x02'
        + API_URL.encode() + b'\x00\x7f\x00'
        + b'googleapis.com/track\x00'
        + b'https://firebase.googleapis.com/v1/track\x00\xff\xfe'
    )
    split = build_zip({
        'AndroidManifest.xml': b'\x03\x00\x08\x00http://schemas.android.com/apk/res/android\x00',
        'res/values/strings.xml': b'<string name="login">' + AUTH_URL.encode() + b'</string>',
    })
    return build_zip({
        'assets/': b'',
        'classes.dex': dex,
        'assets/icon.png': b'\x89PNG https://api.example-shop.com/v1/hidden/endpoint',
        'split.apk': split,
    })


@pytest.fixture
def shop_package(tmp_path, shop_package_bytes):
    path = tmp_path / 'shop.xapk'
    path.write_bytes(shop_package_bytes)
    return path
