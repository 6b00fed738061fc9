"""
Validators for records whose content follows a fixed field layout
(CAA, SSHFP, TLSA, NAPTR, LOC, URI, RP)
"""

import re
from typing import Any, Optional

from ...schemas.dns import DNSValidators
from ..fields import PriorityValidator, coerce_int
from ..result import ValidationResult
from .base import RecordValidator


class FormatRecordValidator(RecordValidator):
    """No CNAME at the name, valid owner, well-formed content, TTL, priority"""

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
        if not content:
            return ValidationResult.failure(f'{self.record_type} record content cannot be empty.')

        content_result = self.validate_content(content)
        if not content_result.is_valid():
            return content_result
        content = content_result.get_data()

        ttl_result = self._validate_ttl(ttl, default_ttl)
        if not ttl_result.is_valid():
            return ttl_result

        prio_result = self._priority_validator().validate(prio)
        if not prio_result.is_valid():
            return prio_result

        return self._result(content, name, prio_result.get_data(), ttl_result.get_data())

    def validate_content(self, content: str) -> ValidationResult:
        raise NotImplementedError

    def _priority_validator(self) -> PriorityValidator:
        return PriorityValidator.zero_only(self.record_type)

    @staticmethod
    def _check(check, content: str) -> ValidationResult:
        try:
            check(content)
        except ValueError as e:
            return ValidationResult.failure(str(e))
        return ValidationResult.success(content)


class CAARecordValidator(FormatRecordValidator):
    """Validator for CAA records (RFC 8659)"""

    record_type = 'CAA'

    def validate_content(self, content: str) -> ValidationResult:
        return self._check(DNSValidators.validate_caa_record_format, content)


class SSHFPRecordValidator(FormatRecordValidator):
    """Validator for SSHFP records (RFC 4255)"""

    record_type = 'SSHFP'

    def validate_content(self, content: str) -> ValidationResult:
        return self._check(DNSValidators.validate_sshfp_record_format, content)


class TLSARecordValidator(FormatRecordValidator):
    """Validator for TLSA records (RFC 6698)"""

    record_type = 'TLSA'

    def validate_content(self, content: str) -> ValidationResult:
        return self._check(DNSValidators.validate_tlsa_record_format, content)


class LOCRecordValidator(FormatRecordValidator):
    """Validator for LOC records (RFC 1876)"""

    record_type = 'LOC'

    def validate_content(self, content: str) -> ValidationResult:
        return self._check(DNSValidators.validate_loc_record_format, content)


class NAPTRRecordValidator(FormatRecordValidator):
    """Validator for NAPTR records (RFC 3403)"""

    record_type = 'NAPTR'

    def validate_content(self, content: str) -> ValidationResult:
        try:
            fields = DNSValidators.split_naptr_record(content)
        except ValueError as e:
            return ValidationResult.failure(str(e))

        replacement = fields[5]
        if replacement != '.':
            replacement_result = self._validate_target(replacement)
            if not replacement_result.is_valid():
                return ValidationResult.failure(f'Invalid NAPTR replacement: {replacement_result.get_message()}')
        return ValidationResult.success(content)


class URIRecordValidator(FormatRecordValidator):
    """Validator for URI records (RFC 7553); content is ``weight "target"``"""

    record_type = 'URI'

    _CONTENT = re.compile(r'^(\S+)\s+"([^"\s]+)"$')

    def validate_content(self, content: str) -> ValidationResult:
        match = self._CONTENT.match(content)
        if not match:
            return ValidationResult.failure('URI record content must be: weight "target".')

        weight = coerce_int(match.group(1))
        if weight is None or weight < 0 or weight > 65535:
            return ValidationResult.failure('Invalid value for URI weight field. It should be an integer between 0 and 65535.')

        if not re.match(r'^[a-zA-Z][a-zA-Z0-9+.-]*:', match.group(2)):
            return ValidationResult.failure('URI record target must be an absolute URI with a scheme.')

        return ValidationResult.success(f'{weight} "{match.group(2)}"')

    def _priority_validator(self) -> PriorityValidator:
        return PriorityValidator(
            0, 65535, 10,
            'Invalid value for URI priority field. It should be an integer between 0 and 65535.'
        )


class RPRecordValidator(FormatRecordValidator):
    """Validator for RP records (RFC 1183); content is ``mbox-dname txt-dname``"""

    record_type = 'RP'

    def validate_content(self, content: str) -> ValidationResult:
        fields = content.split()
        if len(fields) != 2:
            return ValidationResult.failure('RP record content must contain a mailbox name and a TXT domain name.')

        normalized = []
        for field in fields:
            field_result = self._validate_target(field)
            if not field_result.is_valid():
                return field_result
            normalized.append(field_result.get_data()['hostname'])
        return ValidationResult.success(' '.join(normalized))
