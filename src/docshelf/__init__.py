"""Docshelf: a small in-process documentation index with keyword search."""

__version__ = "0.1.0"
