"""
Custom exceptions for the DNS record validation engine

Expected validation failures are never raised; they travel as
``ValidationResult.failure``. Everything here marks a condition where the
engine could not evaluate the input at all.
"""

from typing import Any, Dict, List, Optional


class DNSGuardException(Exception):
    """Base exception for validation engine infrastructure errors"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.message = message
        self.details = details or {}
        self.suggestions = suggestions or []
        super().__init__(self.message)


class UnsupportedRecordType(DNSGuardException):
    """Raised when no enabled validator exists for a record type"""

    def __init__(self, record_type: str, supported: Optional[List[str]] = None):
        self.record_type = record_type
        suggestions = []
        if supported:
            suggestions.append(f"Use one of: {', '.join(supported)}")
        super().__init__(
            f"Unsupported record type: {record_type}",
            details={"record_type": record_type},
            suggestions=suggestions,
        )


class RecordStoreException(DNSGuardException):
    """Exception for record store query failures"""
    pass


class ConfigurationException(DNSGuardException):
    """Exception for configuration errors"""
    pass


class ValidationResultAccessError(RuntimeError):
    """Raised when a result accessor does not match the result's variant"""
    pass
