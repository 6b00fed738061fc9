"""
Validators for records whose content names another host
(MX, NS, PTR, DNAME, ALIAS, SRV)
"""

import re
from typing import Any, Optional

from ..fields import PriorityValidator, coerce_int
from ..result import ValidationResult
from .base import RecordValidator, same_name, validate_target_fqdn


class HostnameTargetValidator(RecordValidator):
    """Owner name plus a single hostname as content"""

    check_target_alias = False
    require_fqdn = False

    def validate(self, content: str, name: str, prio: Any, ttl: Any, default_ttl: int,
                 record_id: int = 0, zone_name: Optional[str] = None) -> ValidationResult:
        cname_result = self._validate_no_cname_at_name(name, record_id or 0)
        if not cname_result.is_valid():
            return cname_result

        hostname_result = self._validate_owner(name)
        if not hostname_result.is_valid():
            return hostname_result
        name = hostname_result.get_data()['hostname']

        target_result = self._validate_target(content)
        if not target_result.is_valid():
            return target_result
        content = target_result.get_data()['hostname']

        if self.require_fqdn:
            fqdn_result = validate_target_fqdn(content, self.record_type)
            if not fqdn_result.is_valid():
                return fqdn_result

        rules_result = self._validate_target_rules(name, content)
        if not rules_result.is_valid():
            return rules_result

        if self.check_target_alias:
            alias_result = self._validate_target_not_cname(content)
            if not alias_result.is_valid():
                return alias_result

        ttl_result = self._validate_ttl(ttl, default_ttl)
        if not ttl_result.is_valid():
            return ttl_result

        prio_result = self._priority_validator().validate(prio)
        if not prio_result.is_valid():
            return prio_result

        return self._result(content, name, prio_result.get_data(), ttl_result.get_data())

    def _validate_target_rules(self, name: str, content: str) -> ValidationResult:
        return ValidationResult.success(True)

    def _priority_validator(self) -> PriorityValidator:
        return PriorityValidator.zero_only(self.record_type)


class MXRecordValidator(HostnameTargetValidator):
    """Validator for MX records (RFC 1035 section 3.3.9, RFC 2181 section 10.3)"""

    record_type = 'MX'
    check_target_alias = True

    def _priority_validator(self) -> PriorityValidator:
        return PriorityValidator(
            0, 65535, 10,
            'Invalid value for MX priority field. It should be an integer between 0 and 65535.'
        )


class NSRecordValidator(HostnameTargetValidator):
    """Validator for NS records (RFC 1035 section 3.3.11, RFC 2181 section 10.3)"""

    record_type = 'NS'
    check_target_alias = True


class PTRRecordValidator(HostnameTargetValidator):
    """Validator for PTR records (RFC 1035 section 3.3.12)"""

    record_type = 'PTR'


class DNAMERecordValidator(HostnameTargetValidator):
    """Validator for DNAME records (RFC 6672)"""

    record_type = 'DNAME'
    require_fqdn = True

    def _validate_target_rules(self, name: str, content: str) -> ValidationResult:
        if same_name(name, content):
            return ValidationResult.failure('A DNAME record cannot point to its own name.')
        return ValidationResult.success(True)


class ALIASRecordValidator(HostnameTargetValidator):
    """Validator for PowerDNS ALIAS records, which are allowed at the zone apex"""

    record_type = 'ALIAS'
    require_fqdn = True


class SRVRecordValidator(RecordValidator):
    """Validator for SRV records (RFC 2782)

    Content holds ``weight port target``; the priority travels in the
    priority field.
    """

    record_type = 'SRV'

    _SERVICE_NAME = re.compile(r'_[a-zA-Z0-9-]+\._[a-zA-Z0-9-]+(\..+)?')

    def validate(self, content: str, name: str, prio: Any, ttl: Any, default_ttl: int,
                 record_id: int = 0, zone_name: Optional[str] = None) -> ValidationResult:
        cname_result = self._validate_no_cname_at_name(name, record_id or 0)
        if not cname_result.is_valid():
            return cname_result

        if not self._SERVICE_NAME.fullmatch((name or '').strip()):
            return ValidationResult.failure(
                'SRV record name must follow the _service._protocol.name format (e.g. _sip._tcp.example.com).'
            )

        hostname_result = self._validate_owner(name)
        if not hostname_result.is_valid():
            return hostname_result
        name = hostname_result.get_data()['hostname']

        content_result = self.validate_srv_content(content)
        if not content_result.is_valid():
            return content_result
        content = content_result.get_data()

        target = content.split()[2]
        if target != '.':
            alias_result = self._validate_target_not_cname(target)
            if not alias_result.is_valid():
                return alias_result

        ttl_result = self._validate_ttl(ttl, default_ttl)
        if not ttl_result.is_valid():
            return ttl_result

        prio_result = PriorityValidator(
            0, 65535, 10,
            'Invalid value for SRV priority field. It should be an integer between 0 and 65535.'
        ).validate(prio)
        if not prio_result.is_valid():
            return prio_result

        return self._result(content, name, prio_result.get_data(), ttl_result.get_data())

    def validate_srv_content(self, content: str) -> ValidationResult:
        """Check ``weight port target`` and return it normalized"""
        fields = (content or '').split()
        if len(fields) != 3:
            return ValidationResult.failure('SRV record content must contain exactly three fields: weight port target.')

        weight, port, target = fields
        for label, value in (('weight', weight), ('port', port)):
            number = coerce_int(value)
            if number is None or number < 0 or number > 65535:
                return ValidationResult.failure(
                    f'Invalid value for SRV {label} field. It should be an integer between 0 and 65535.'
                )

        target_result = self._validate_target(target)
        if not target_result.is_valid():
            return target_result
        target = target_result.get_data()['hostname']

        return ValidationResult.success(f"{int(weight)} {int(port)} {target}")
