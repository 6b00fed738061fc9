"""
Validators for free-text records (TXT, SPF, HINFO)
"""

import re
from typing import Any, List, Optional, Tuple

from ...schemas.dns import DNSValidators
from ..fields import StringLengthValidator
from ..result import ValidationResult
from .base import RecordValidator

MAX_CHARACTER_STRING = 255
MAX_TXT_CONTENT = 65535

_QUOTED_STRING = re.compile(r'"((?:[^"\\]|\\.)*)"\s*')
_HINFO_FIELD = re.compile(r'"[^"]*"|[^\s"]+')


def split_character_strings(content: str) -> Tuple[List[str], str]:
    """
    Split TXT content into its character-strings

    Quoted content may hold several ``"..."`` strings; unquoted content is
    one string and comes back wrapped in quotes.

    Returns:
        (strings, normalized content)
    """
    content = content.strip()
    if not content.startswith('"'):
        if re.search(r'(?<!\\)"', content):
            raise ValueError('TXT record content contains unescaped double quotes.')
        if (len(content) - len(content.rstrip('\\'))) % 2:
            raise ValueError('TXT record content cannot end with an unescaped backslash.')
        return [content], f'"{content}"'

    strings = []
    position = 0
    while position < len(content):
        match = _QUOTED_STRING.match(content, position)
        if not match:
            raise ValueError('TXT record content must be one or more properly quoted strings.')
        strings.append(match.group(1))
        position = match.end()
    return strings, content


class TXTRecordValidator(RecordValidator):
    """Validator for TXT records (RFC 1035 section 3.3.14)"""

    record_type = 'TXT'

    def validate(self, content: str, name: str, prio: Any, ttl: Any, default_ttl: int,
                 record_id: int = 0, zone_name: Optional[str] = None) -> ValidationResult:
        cname_result = self._validate_no_cname_at_name(name, record_id or 0)
        if not cname_result.is_valid():
            return cname_result

        hostname_result = self._validate_owner(name)
        if not hostname_result.is_valid():
            return hostname_result
        name = hostname_result.get_data()['hostname']

        length_result = StringLengthValidator(MAX_TXT_CONTENT).validate(content)
        if not length_result.is_valid():
            return length_result

        content_result = self.validate_txt_content(length_result.get_data())
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

    def validate_txt_content(self, content: str) -> ValidationResult:
        try:
            strings, normalized = split_character_strings(content)
        except ValueError as e:
            return ValidationResult.failure(str(e))

        for string in strings:
            if len(string) > MAX_CHARACTER_STRING:
                return ValidationResult.failure(
                    f'TXT record strings cannot exceed {MAX_CHARACTER_STRING} characters. '
                    'Split longer values into several quoted strings.'
                )

        try:
            self._validate_payload(''.join(strings))
        except ValueError as e:
            return ValidationResult.failure(f'{self.record_type} record validation failed: {e}')

        return ValidationResult.success(normalized)

    def _validate_payload(self, payload: str) -> None:
        if payload.startswith('v=spf1'):
            DNSValidators.validate_spf_record_syntax(payload)
        elif payload.startswith('v=DKIM1'):
            DNSValidators.validate_dkim_record(payload)
        elif payload.startswith('v=DMARC1'):
            DNSValidators.validate_dmarc_record(payload)


class SPFRecordValidator(TXTRecordValidator):
    """Validator for the legacy SPF record type (RFC 4408)"""

    record_type = 'SPF'

    def _validate_payload(self, payload: str) -> None:
        DNSValidators.validate_spf_record_syntax(payload)


class HINFORecordValidator(RecordValidator):
    """Validator for HINFO records (RFC 1035 section 3.3.2)"""

    record_type = 'HINFO'

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
        fields = _HINFO_FIELD.findall(content)
        if len(fields) != 2 or ''.join(fields).count('"') != content.count('"'):
            return ValidationResult.failure(
                'HINFO record content must contain exactly two fields: CPU and OS. Quote fields containing spaces.'
            )
        for field in fields:
            if len(field.strip('"')) > MAX_CHARACTER_STRING:
                return ValidationResult.failure(
                    f'HINFO fields cannot exceed {MAX_CHARACTER_STRING} characters.'
                )

        ttl_result = self._validate_ttl(ttl, default_ttl)
        if not ttl_result.is_valid():
            return ttl_result

        prio_result = self._validate_zero_priority(prio)
        if not prio_result.is_valid():
            return prio_result

        return self._result(' '.join(fields), name, prio_result.get_data(), ttl_result.get_data())
