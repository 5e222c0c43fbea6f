"""Utility functions"""
from .sanitize import sanitize_name, make_collection_filename
