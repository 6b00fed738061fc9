"""
Validator registry: resolves a record type token to its validator
"""

from typing import Dict, List, Type

from ..core.config import DNSSEC_RECORD_TYPES, ConfigurationManager
from ..core.exceptions import UnsupportedRecordType
from ..core.logging_config import get_logger
from ..schemas.dns import RecordType
from ..services.record_gateway import RecordQueryGateway
from .validators import (
    AAAARecordValidator, ALIASRecordValidator, ARecordValidator,
    CAARecordValidator, CNAMERecordValidator, DNAMERecordValidator,
    DefaultRecordValidator, HINFORecordValidator, LOCRecordValidator,
    MXRecordValidator, NAPTRRecordValidator, NSRecordValidator,
    PTRRecordValidator, RecordValidator, RPRecordValidator,
    SOARecordValidator, SPFRecordValidator, SRVRecordValidator,
    SSHFPRecordValidator, TLSARecordValidator, TXTRecordValidator,
    URIRecordValidator,
)

logger = get_logger(__name__)


# Types missing from this table fall back to DefaultRecordValidator
VALIDATOR_CLASSES: Dict[RecordType, Type[RecordValidator]] = {
    RecordType.A: ARecordValidator,
    RecordType.AAAA: AAAARecordValidator,
    RecordType.ALIAS: ALIASRecordValidator,
    RecordType.CAA: CAARecordValidator,
    RecordType.CNAME: CNAMERecordValidator,
    RecordType.DNAME: DNAMERecordValidator,
    RecordType.HINFO: HINFORecordValidator,
    RecordType.LOC: LOCRecordValidator,
    RecordType.MX: MXRecordValidator,
    RecordType.NAPTR: NAPTRRecordValidator,
    RecordType.NS: NSRecordValidator,
    RecordType.PTR: PTRRecordValidator,
    RecordType.RP: RPRecordValidator,
    RecordType.SOA: SOARecordValidator,
    RecordType.SPF: SPFRecordValidator,
    RecordType.SRV: SRVRecordValidator,
    RecordType.SSHFP: SSHFPRecordValidator,
    RecordType.TLSA: TLSARecordValidator,
    RecordType.TXT: TXTRecordValidator,
    RecordType.URI: URIRecordValidator,
}


class ValidatorRegistry:
    """One validator instance per enabled record type

    The table is built once; lookups are case-insensitive dictionary hits.
    """

    def __init__(self, config: ConfigurationManager, gateway: RecordQueryGateway):
        self.config = config
        self.gateway = gateway
        self._validators: Dict[str, RecordValidator] = {}

        for record_type in self._enabled_types():
            validator_class = VALIDATOR_CLASSES.get(record_type)
            if validator_class is None:
                validator = DefaultRecordValidator(config, gateway, record_type.value)
            else:
                validator = validator_class(config, gateway)
            self._validators[record_type.value] = validator

        logger.debug(f"Validator registry ready for {', '.join(self.supported_types())}")

    def _enabled_types(self) -> List[RecordType]:
        tokens = list(self.config.get('dns', 'domain_record_types', []))
        tokens += self.config.get('dns', 'reverse_record_types', [])
        if self.config.get('dnssec', 'enabled', False):
            tokens += DNSSEC_RECORD_TYPES

        enabled = []
        for token in tokens:
            record_type = RecordType.from_token(token)
            if record_type is None:
                logger.warning(f"Ignoring unknown record type in configuration: {token}")
                continue
            if record_type.value in DNSSEC_RECORD_TYPES and not self.config.get('dnssec', 'enabled', False):
                continue
            if record_type not in enabled:
                enabled.append(record_type)
        return enabled

    def for_type(self, record_type: str) -> RecordValidator:
        """
        Resolve the validator for a record type token

        Raises:
            UnsupportedRecordType: the token is unknown or not enabled
        """
        token = record_type.value if isinstance(record_type, RecordType) else str(record_type or '')
        validator = self._validators.get(token.strip().upper())
        if validator is None:
            raise UnsupportedRecordType(token, self.supported_types())
        return validator

    def supported_types(self) -> List[str]:
        return sorted(self._validators)
