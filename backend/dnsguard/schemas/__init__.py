"""
Pydantic schemas for record validation
"""

from .dns import DNSValidators, RecordCandidate, RecordType, ValidatedRecord

__all__ = ["DNSValidators", "RecordCandidate", "RecordType", "ValidatedRecord"]
