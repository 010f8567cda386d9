"""Seekarr: classification and series aggregation for media search results."""

__version__ = "0.1.0"
