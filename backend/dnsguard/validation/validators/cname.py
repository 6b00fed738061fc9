"""
Validator for CNAME records

CNAME records alias one owner name to another (RFC 1034 section 3.6.2,
RFC 2181 section 10.1). An owner with a CNAME may carry no other data,
may only have one CNAME, and must never be the target of an MX or NS
record (RFC 2181 section 10.3).
"""

from typing import Any, Optional

from ..result import ValidationResult
from .base import RecordValidator, same_name, validate_target_fqdn


class CNAMERecordValidator(RecordValidator):
    """Validator for CNAME records"""

    record_type = 'CNAME'

    def validate(self, content: str, name: str, prio: Any, ttl: Any, default_ttl: int,
                 record_id: int = 0, zone_name: Optional[str] = None) -> ValidationResult:
        """
        Validate a CNAME record

        Store-backed checks run first, on the canonical lookup form of the
        name (see ``lookup_name``), before the hostname grammar is checked.

        Args:
            content: Target hostname
            name: Alias (owner) hostname
            prio: Priority, must be empty or 0
            ttl: TTL value, empty for the default
            default_ttl: TTL used when none is given
            record_id: Id of the record being updated, 0 when creating
            zone_name: Zone the record belongs to, if known

        Returns:
            ValidationResult with content, name, prio and ttl on success
        """
        record_id = record_id or 0
        lookup = self.lookup_name(name)

        # 1. No other record type at this name
        unique_result = self.validate_cname_unique(lookup, record_id)
        if not unique_result.is_valid():
            return unique_result

        # 2. No other CNAME at this name
        existence_result = self.validate_cname_existence(lookup, record_id)
        if not existence_result.is_valid():
            return existence_result

        # 3. No MX or NS record pointing at this name
        name_result = self.validate_cname_name(lookup)
        if not name_result.is_valid():
            return name_result

        # 4. Owner hostname
        hostname_result = self._validate_owner(name)
        if not hostname_result.is_valid():
            return hostname_result
        name = hostname_result.get_data()['hostname']

        # 5. Target hostname
        target_result = self._validate_target(content)
        if not target_result.is_valid():
            return target_result
        content = target_result.get_data()['hostname']

        # 5a. Target must be fully qualified
        fqdn_result = validate_target_fqdn(content, self.record_type)
        if not fqdn_result.is_valid():
            return fqdn_result

        # 6. Not at the zone apex
        if zone_name:
            apex_result = self.validate_not_empty_cname_rr(name, zone_name)
            if not apex_result.is_valid():
                return apex_result

        # 7. TTL
        ttl_result = self._validate_ttl(ttl, default_ttl)
        if not ttl_result.is_valid():
            return ttl_result

        # 8. Priority
        prio_result = self._validate_zero_priority(prio)
        if not prio_result.is_valid():
            return prio_result

        return self._result(content, name, prio_result.get_data(), ttl_result.get_data())

    def validate_cname_unique(self, name: str, record_id: int) -> ValidationResult:
        """Check that no record of another type already uses this name"""
        if self.gateway.exists_record_with_name_and_type_not(self.lookup_name(name), 'CNAME', record_id):
            return ValidationResult.failure('This is not a valid CNAME. There already exists a record with this name.')
        return ValidationResult.success(True)

    def validate_cname_existence(self, name: str, record_id: int) -> ValidationResult:
        """Check that no other CNAME already claims this name"""
        if self.gateway.exists_record_with_name_and_type(self.lookup_name(name), 'CNAME', record_id):
            return ValidationResult.failure('This is not a valid record. There already exists a CNAME with this name.')
        return ValidationResult.success(True)

    def validate_cname_name(self, name: str) -> ValidationResult:
        """Check that no MX or NS record targets this name"""
        if self.gateway.exists_record_with_content_and_type_in(self.lookup_name(name), {'MX', 'NS'}):
            return ValidationResult.failure('This is not a valid CNAME. Did you assign an MX or NS record to the record?')
        return ValidationResult.success(True)

    @staticmethod
    def validate_not_empty_cname_rr(name: str, zone_name: str) -> ValidationResult:
        """The zone apex cannot be an alias"""
        if same_name(name, zone_name):
            return ValidationResult.failure('Empty CNAME records are not allowed.')
        return ValidationResult.success(True)

    @staticmethod
    def validate_target_fqdn(target: str) -> ValidationResult:
        return validate_target_fqdn(target, 'CNAME')
