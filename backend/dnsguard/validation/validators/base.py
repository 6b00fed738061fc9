"""
Shared contract and helpers for the per-type record validators
"""

from typing import Any, Optional

from ...core.config import ConfigurationManager
from ...schemas.dns import ValidatedRecord
from ...services.record_gateway import RecordQueryGateway
from ..fields import HostnameValidator, PriorityValidator, TTLValidator
from ..result import ValidationResult


class RecordValidator:
    """Base class for record type validators

    Subclasses implement ``validate`` as an ordered list of checks that
    returns the first failure it meets.
    """

    record_type: str = ""

    def __init__(self, config: ConfigurationManager, gateway: RecordQueryGateway):
        self.config = config
        self.gateway = gateway
        self.hostname_validator = HostnameValidator(config)
        self.ttl_validator = TTLValidator()

    def validate(self, content: str, name: str, prio: Any, ttl: Any, default_ttl: int,
                 record_id: int = 0, zone_name: Optional[str] = None) -> ValidationResult:
        raise NotImplementedError

    def __repr__(self):
        return f"<{self.__class__.__name__}(record_type='{self.record_type}')>"

    # Building blocks

    def lookup_name(self, name: Optional[str]) -> str:
        """
        Owner name in the form the record store holds it

        Trimmed, one trailing dot removed and lower-cased when
        ``dns.lowercase_hostnames`` is set, so names differing only in case
        or a trailing dot hit the same rows.
        """
        name = str(name or '').strip()
        if name.endswith('.') and name != '.':
            name = name[:-1]
        if self.config.get('dns', 'lowercase_hostnames', True):
            name = name.lower()
        return name

    def _validate_no_cname_at_name(self, name: str, record_id: int) -> ValidationResult:
        """A non-CNAME record cannot share its owner name with a CNAME"""
        if self.gateway.exists_record_with_name_and_type(self.lookup_name(name), 'CNAME', record_id):
            return ValidationResult.failure('This is not a valid record. There already exists a CNAME with this name.')
        return ValidationResult.success(True)

    def _validate_target_not_cname(self, target: str) -> ValidationResult:
        """Targets must be canonical names, not aliases (RFC 2181 section 10.3)"""
        if self.gateway.exists_record_with_name_and_type(self.lookup_name(target), 'CNAME'):
            return ValidationResult.failure(
                f'{self.record_type} records must not point to a CNAME. {target} is an alias.'
            )
        return ValidationResult.success(True)

    def _validate_owner(self, name: str) -> ValidationResult:
        return self.hostname_validator.validate(name, True)

    def _validate_target(self, target: str) -> ValidationResult:
        return self.hostname_validator.validate(target, False)

    def _validate_ttl(self, ttl: Any, default_ttl: int) -> ValidationResult:
        return self.ttl_validator.validate(ttl, default_ttl)

    def _validate_zero_priority(self, prio: Any) -> ValidationResult:
        return PriorityValidator.zero_only(self.record_type).validate(prio)

    @staticmethod
    def _result(content: str, name: str, prio: int, ttl: int) -> ValidationResult:
        record = ValidatedRecord(content=content, name=name, prio=prio, ttl=ttl)
        return ValidationResult.success(record.model_dump())


def validate_target_fqdn(target: str, record_type: str = 'CNAME') -> ValidationResult:
    """
    Check that an alias target looks fully qualified

    The root ``.`` is accepted. Anything else needs at least two labels
    and an alphabetic top-level label of two or more characters. This is
    a plausibility heuristic, not a registry lookup.
    """
    if target == '.':
        return ValidationResult.success(True)

    labels = target.split('.')
    if len(labels) < 2:
        return ValidationResult.failure(
            f'{record_type} target must be a fully qualified domain name (FQDN). Single-label names are not allowed.'
        )

    tld = labels[-1]
    if len(tld) < 2 or not (tld.isascii() and tld.isalpha()):
        return ValidationResult.failure(
            f'{record_type} target must be a fully qualified domain name (FQDN) with a valid top-level domain.'
        )

    return ValidationResult.success(True)


def same_name(first: str, second: str) -> bool:
    """Owner name comparison ignoring case and one trailing dot"""
    return first.rstrip('.').lower() == second.rstrip('.').lower()
