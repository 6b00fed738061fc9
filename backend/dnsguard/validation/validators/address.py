"""
Validators for address records (A, AAAA)
"""

from typing import Any, Optional

from ..fields import IPAddressValidator
from ..result import ValidationResult
from .base import RecordValidator


class ARecordValidator(RecordValidator):
    """Validator for A records (RFC 1035 section 3.4.1)"""

    record_type = 'A'

    def validate(self, content: str, name: str, prio: Any, ttl: Any, default_ttl: int,
                 record_id: int = 0, zone_name: Optional[str] = None) -> ValidationResult:
        cname_result = self._validate_no_cname_at_name(name, record_id or 0)
        if not cname_result.is_valid():
            return cname_result

        hostname_result = self._validate_owner(name)
        if not hostname_result.is_valid():
            return hostname_result
        name = hostname_result.get_data()['hostname']

        address_result = self._validate_address(content)
        if not address_result.is_valid():
            return address_result
        content = address_result.get_data()

        ttl_result = self._validate_ttl(ttl, default_ttl)
        if not ttl_result.is_valid():
            return ttl_result

        prio_result = self._validate_zero_priority(prio)
        if not prio_result.is_valid():
            return prio_result

        return self._result(content, name, prio_result.get_data(), ttl_result.get_data())

    def _validate_address(self, content: str) -> ValidationResult:
        return IPAddressValidator.validate_ipv4(content)


class AAAARecordValidator(ARecordValidator):
    """Validator for AAAA records (RFC 3596)"""

    record_type = 'AAAA'

    def _validate_address(self, content: str) -> ValidationResult:
        return IPAddressValidator.validate_ipv6(content)
