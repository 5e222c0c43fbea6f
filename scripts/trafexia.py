#!/usr/bin/env python3
"""
Trafexia CLI - static endpoint discovery

Commands:
    analyze          Discover endpoint URLs in an APK/XAPK
    export-requests  Convert captured requests to a Postman collection
    categories       Show URL classification categories
"""
import os
import sys

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from trafexia.cli.main import cli


if __name__ == '__main__':
    cli()
