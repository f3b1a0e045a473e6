"""Streams and box classes for reading ISO base media files."""

__version__ = "0.1.0"