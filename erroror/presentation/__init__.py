"""Presentation layer: HTTP mapping of error values."""
