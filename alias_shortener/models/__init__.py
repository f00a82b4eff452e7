"""
Database models for the alias shortener.

A single table: alias -> url records.
"""

from .url import URL

__all__ = ["URL"]
