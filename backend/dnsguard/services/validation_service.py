"""
Record validation service: the single entry point the persistence layer
calls before writing a record
"""

from typing import Any, Optional

from ..core.config import ConfigurationManager
from ..core.logging_config import get_validation_logger
from ..schemas.dns import RecordCandidate
from ..validation.registry import ValidatorRegistry
from ..validation.result import ValidationResult
from .record_gateway import RecordQueryGateway

logger = get_validation_logger()


class RecordValidationService:
    """Decides whether a proposed record write is acceptable

    Read-only: the service only queries the record store through the
    gateway and never writes to it. Unsupported record types and record
    store failures propagate as exceptions.
    """

    def __init__(self, config: ConfigurationManager, gateway: RecordQueryGateway):
        self.config = config
        self.gateway = gateway
        self.registry = ValidatorRegistry(config, gateway)

    def validate(self, record_type: str, content: str, name: str, prio: Any = None,
                 ttl: Any = None, default_ttl: Optional[int] = None, record_id: int = 0,
                 zone_name: Optional[str] = None) -> ValidationResult:
        """
        Validate a proposed record

        Args:
            record_type: Record type token, case-insensitive
            content: Type-specific payload
            name: Owner hostname
            prio: Priority as submitted
            ttl: TTL as submitted
            default_ttl: TTL used when none is submitted; configured default when None
            record_id: Id of the record being updated, 0 when creating
            zone_name: Zone the record belongs to, if known

        Returns:
            ValidationResult with the normalized record or the first failure

        Raises:
            UnsupportedRecordType: record_type is unknown or disabled
            RecordStoreException: the record store could not be queried
        """
        validator = self.registry.for_type(record_type)
        if default_ttl is None:
            default_ttl = self.config.get('dns', 'default_ttl', 86400)

        logger.debug(f"Validating {validator.record_type} record '{name}' -> '{content}' (record id {record_id or 0})")

        result = validator.validate(content, name, prio, ttl, default_ttl, record_id or 0, zone_name)

        if result.is_valid():
            logger.debug(f"Accepted {validator.record_type} record '{name}'")
        else:
            logger.info(f"Rejected {validator.record_type} record '{name}': {result.get_message()}")

        return result

    def validate_candidate(self, candidate: RecordCandidate) -> ValidationResult:
        """Validate a RecordCandidate"""
        return self.validate(
            candidate.type,
            candidate.content,
            candidate.name,
            candidate.prio,
            candidate.ttl,
            candidate.default_ttl,
            candidate.record_id,
            candidate.zone_name,
        )
