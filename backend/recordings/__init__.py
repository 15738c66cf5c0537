"""Recordings - album, artist and label catalog API."""
__version__ = "0.1.0"
