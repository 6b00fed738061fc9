"""
Validator for SOA records (RFC 1035 section 3.3.13)
"""

from typing import Any, Optional

from ...schemas.dns import DNSValidators
from ..result import ValidationResult
from .base import RecordValidator, same_name


class SOARecordValidator(RecordValidator):
    """Validator for SOA records

    Content is ``mname rname serial refresh retry expire minimum``. A zone
    has exactly one SOA and it lives at the apex.
    """

    record_type = 'SOA'

    def validate(self, content: str, name: str, prio: Any, ttl: Any, default_ttl: int,
                 record_id: int = 0, zone_name: Optional[str] = None) -> ValidationResult:
        record_id = record_id or 0

        cname_result = self._validate_no_cname_at_name(name, record_id)
        if not cname_result.is_valid():
            return cname_result

        hostname_result = self.hostname_validator.validate(name, False)
        if not hostname_result.is_valid():
            return hostname_result
        name = hostname_result.get_data()['hostname']

        if zone_name and not same_name(name, zone_name):
            return ValidationResult.failure('SOA records can only be created at the zone apex.')

        if self.gateway.exists_record_with_name_and_type(self.lookup_name(name), 'SOA', record_id):
            return ValidationResult.failure('This zone already has an SOA record.')

        content_result = self.validate_soa_content(content)
        if not content_result.is_valid():
            return content_result
        content = content_result.get_data()

        ttl_result = self._validate_ttl(ttl, default_ttl)
        if not ttl_result.is_valid():
            return ttl_result

        prio_result = self._validate_zero_priority(prio)
        if not prio_result.is_valid():
            return prio_result

        return self._result(content, name, prio_result.get_data(), ttl_result.get_data())

    def validate_soa_content(self, content: str) -> ValidationResult:
        """Check the seven SOA fields and return them normalized"""
        fields = (content or '').split()
        if len(fields) != 7:
            return ValidationResult.failure(
                'SOA record must have exactly 7 fields: primary nameserver, hostmaster, serial, refresh, retry, expire, minimum.'
            )

        mname_result = self._validate_target(fields[0])
        if not mname_result.is_valid():
            return ValidationResult.failure(f'Invalid SOA primary nameserver: {mname_result.get_message()}')
        mname = mname_result.get_data()['hostname']

        try:
            rname = DNSValidators.validate_dns_email_format(fields[1])
            DNSValidators.validate_soa_numbers(*fields[2:])
        except ValueError as e:
            return ValidationResult.failure(str(e))

        numbers = ' '.join(str(int(value)) for value in fields[2:])
        return ValidationResult.success(f"{mname} {rname} {numbers}")
