"""
DNS record validation: results, field validators, record type validators
and the registry that dispatches between them
"""

from .fields import (
    HostnameValidator, IPAddressValidator, PriorityValidator,
    StringLengthValidator, TTLValidator,
)
from .registry import ValidatorRegistry
from .result import ValidationResult

__all__ = [
    "HostnameValidator", "IPAddressValidator", "PriorityValidator",
    "StringLengthValidator", "TTLValidator", "ValidationResult",
    "ValidatorRegistry",
]
