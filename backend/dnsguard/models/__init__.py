"""
Database models for the record store
"""

from .dns import Domain, Record

__all__ = ["Domain", "Record"]
