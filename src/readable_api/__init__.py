"""Readable API: multi-tenant categories, posts and comments."""

__version__ = "1.0.0"
