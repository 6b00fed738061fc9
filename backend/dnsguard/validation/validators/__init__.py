"""
Per-type record validators
"""

from .address import AAAARecordValidator, ARecordValidator
from .base import RecordValidator, validate_target_fqdn
from .cname import CNAMERecordValidator
from .formats import (
    CAARecordValidator, LOCRecordValidator, NAPTRRecordValidator,
    RPRecordValidator, SSHFPRecordValidator, TLSARecordValidator,
    URIRecordValidator,
)
from .generic import DefaultRecordValidator
from .soa import SOARecordValidator
from .targets import (
    ALIASRecordValidator, DNAMERecordValidator, MXRecordValidator,
    NSRecordValidator, PTRRecordValidator, SRVRecordValidator,
)
from .text import HINFORecordValidator, SPFRecordValidator, TXTRecordValidator

__all__ = [
    "RecordValidator", "validate_target_fqdn",
    "ARecordValidator", "AAAARecordValidator", "ALIASRecordValidator",
    "CAARecordValidator", "CNAMERecordValidator", "DNAMERecordValidator",
    "DefaultRecordValidator", "HINFORecordValidator", "LOCRecordValidator",
    "MXRecordValidator", "NAPTRRecordValidator", "NSRecordValidator",
    "PTRRecordValidator", "RPRecordValidator", "SOARecordValidator",
    "SPFRecordValidator", "SRVRecordValidator", "SSHFPRecordValidator",
    "TLSARecordValidator", "TXTRecordValidator", "URIRecordValidator",
]
