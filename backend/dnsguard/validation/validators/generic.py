"""
Fallback validator for enabled record types without dedicated rules
"""

from typing import Any, Optional

import dns.exception
import dns.name
import dns.rdata
import dns.rdataclass
import dns.rdatatype

from ...core.config import ConfigurationManager
from ...services.record_gateway import RecordQueryGateway
from ..result import ValidationResult
from .base import RecordValidator


class DefaultRecordValidator(RecordValidator):
    """Owner name, TTL and zero priority checks, with content parsed by dnspython"""

    def __init__(self, config: ConfigurationManager, gateway: RecordQueryGateway, record_type: str):
        super().__init__(config, gateway)
        self.record_type = record_type.upper()

    def validate(self, content: str, name: str, prio: Any, ttl: Any, default_ttl: int,
                 record_id: int = 0, zone_name: Optional[str] = None) -> ValidationResult:
        cname_result = self._validate_no_cname_at_name(name, record_id or 0)
        if not cname_result.is_valid():
            return cname_result

        hostname_result = self._validate_owner(name)
        if not hostname_result.is_valid():
            return hostname_result
        name = hostname_result.get_data()['hostname']

        content = (content or '').strip()
        content_result = self.validate_rdata(content)
        if not content_result.is_valid():
            return content_result

        ttl_result = self._validate_ttl(ttl, default_ttl)
        if not ttl_result.is_valid():
            return ttl_result

        prio_result = self._validate_zero_priority(prio)
        if not prio_result.is_valid():
            return prio_result

        return self._result(content, name, prio_result.get_data(), ttl_result.get_data())

    def validate_rdata(self, content: str) -> ValidationResult:
        """Parse content as presentation-format rdata of this type"""
        if not content:
            return ValidationResult.failure(f'{self.record_type} record content cannot be empty.')

        try:
            rdtype = dns.rdatatype.from_text(self.record_type)
            dns.rdata.from_text(dns.rdataclass.IN, rdtype, content, origin=dns.name.root)
        except dns.rdatatype.UnknownRdatatype:
            # Nothing to parse against; accept the content as given
            return ValidationResult.success(content)
        except (dns.exception.DNSException, ValueError) as e:
            return ValidationResult.failure(f'Invalid {self.record_type} record content: {e}')

        return ValidationResult.success(content)
