"""Trafexia - static API endpoint discovery for Android packages"""
__version__ = '0.3.1'
