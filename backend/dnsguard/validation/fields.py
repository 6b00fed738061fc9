"""
Single-field validators used by the record type validators

None of these touch the record store; the hostname validator reads its
policy from the configuration it is built with.
"""

import ipaddress
import re
from typing import Any, Optional

from ..core.config import ConfigurationManager
from .result import ValidationResult

MAX_LABEL_LENGTH = 63
MAX_TTL = 2147483647

_INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')
_CLASSLESS_LABEL_PATTERN = re.compile(r'[0-9]+(?:-[0-9]+)?/[0-9]+')


def coerce_int(value: Any) -> Optional[int]:
    """Integer value of an int or integer string, None for anything else"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value.strip()):
        return int(value.strip())
    return None


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


class HostnameValidator:
    """DNS label grammar for owner names and target hostnames"""

    def __init__(self, config: ConfigurationManager):
        self.config = config

    def validate(self, hostname: Optional[str], wildcard: bool = False) -> ValidationResult:
        """
        Validate a hostname

        Args:
            hostname: Name to check; one trailing dot is ignored
            wildcard: True for owner names, which may start with a ``*`` label

        Returns:
            ValidationResult with ``{'hostname': normalized}`` on success
        """
        if hostname is None:
            return ValidationResult.failure('Hostname cannot be empty.')

        hostname = str(hostname).strip()
        if hostname == '.':
            return ValidationResult.success({'hostname': hostname})

        if hostname.endswith('.'):
            hostname = hostname[:-1]
        if not hostname:
            return ValidationResult.failure('Hostname cannot be empty.')

        max_length = self.config.get('dns', 'hostname_max_length', 255)
        if len(hostname.encode('utf-8')) > max_length:
            return ValidationResult.failure(f'The hostname is too long (maximum {max_length} characters).')

        labels = hostname.split('.')
        if self.config.get('dns', 'top_level_tld_check', False) and len(labels) == 1:
            return ValidationResult.failure('You are not allowed to create a record for a top level domain.')

        slash_label = self._classless_reverse_label(hostname, labels)
        if slash_label is None and '/' in hostname:
            return ValidationResult.failure('Given hostname has too many slashes.')

        if self.config.get('dns', 'allow_underscores', True):
            label_pattern = re.compile(r'[a-zA-Z0-9_-]+')
        else:
            label_pattern = re.compile(r'[a-zA-Z0-9-]+')

        for index, label in enumerate(labels):
            if not label or len(label) > MAX_LABEL_LENGTH:
                return ValidationResult.failure('Given hostname or one of the labels is too short or too long.')

            if label == '*':
                if wildcard and index == 0:
                    continue
                return ValidationResult.failure('Wildcards are only allowed as the first label of a record name.')

            if label.startswith('-') or label.endswith('-'):
                return ValidationResult.failure('A hostname can not start or end with a dash.')

            if index == slash_label:
                if not _CLASSLESS_LABEL_PATTERN.fullmatch(label):
                    return ValidationResult.failure('You have invalid characters in your hostname.')
                continue

            if not label_pattern.fullmatch(label):
                return ValidationResult.failure('You have invalid characters in your hostname.')

        if self.config.get('dns', 'lowercase_hostnames', True):
            hostname = hostname.lower()

        return ValidationResult.success({'hostname': hostname})

    @staticmethod
    def _classless_reverse_label(hostname: str, labels: list) -> Optional[int]:
        """Index of the RFC 2317 delegation label, if the name is one"""
        if hostname.count('/') != 1 or len(labels) < 3:
            return None
        if [label.lower() for label in labels[-2:]] != ['in-addr', 'arpa']:
            return None
        for index in (0, 1):
            if '/' in labels[index]:
                return index
        return None


class TTLValidator:
    """TTL defaulting and range check (RFC 2181 section 8)"""

    def validate(self, ttl: Any, default_ttl: int) -> ValidationResult:
        if is_blank(ttl):
            return ValidationResult.success(default_ttl)

        value = coerce_int(ttl)
        if value is None or value < 0 or value > MAX_TTL:
            return ValidationResult.failure(
                f'Invalid value for TTL field. It should be an integer between 0 and {MAX_TTL}.'
            )
        return ValidationResult.success(value)


class PriorityValidator:
    """Bounds check for priority-like numeric fields"""

    def __init__(self, minimum: int = 0, maximum: int = 65535, default: int = 10,
                 message: Optional[str] = None):
        self.minimum = minimum
        self.maximum = maximum
        self.default = default
        self.message = message or (
            f'Invalid value for priority field. It should be an integer between {minimum} and {maximum}.'
        )

    @classmethod
    def zero_only(cls, record_type: str) -> "PriorityValidator":
        """Validator for types that carry no priority"""
        return cls(0, 0, 0, f'Invalid value for priority field. {record_type} records must have priority value of 0.')

    def validate(self, prio: Any) -> ValidationResult:
        if is_blank(prio):
            return ValidationResult.success(self.default)

        value = coerce_int(prio)
        if value is None or value < self.minimum or value > self.maximum:
            return ValidationResult.failure(self.message)
        return ValidationResult.success(value)


class IPAddressValidator:
    """IPv4/IPv6 literal syntax"""

    @staticmethod
    def validate_ipv4(address: Optional[str]) -> ValidationResult:
        try:
            return ValidationResult.success(str(ipaddress.IPv4Address((address or '').strip())))
        except ValueError:
            return ValidationResult.failure('This is not a valid IPv4 address.')

    @staticmethod
    def validate_ipv6(address: Optional[str]) -> ValidationResult:
        try:
            return ValidationResult.success(str(ipaddress.IPv6Address((address or '').strip())))
        except ValueError:
            return ValidationResult.failure('This is not a valid IPv6 address.')

    @staticmethod
    def validate(address: Optional[str]) -> ValidationResult:
        """Either address family"""
        try:
            return ValidationResult.success(str(ipaddress.ip_address((address or '').strip())))
        except ValueError:
            return ValidationResult.failure('This is not a valid IP address.')


class StringLengthValidator:
    """Trimmed string length bounds"""

    def __init__(self, max_length: int, min_length: int = 1, label: str = 'content'):
        self.max_length = max_length
        self.min_length = min_length
        self.label = label

    def validate(self, value: Optional[str]) -> ValidationResult:
        value = (value or '').strip()
        if len(value) < self.min_length:
            return ValidationResult.failure(f'The {self.label} field cannot be empty.')
        if len(value) > self.max_length:
            return ValidationResult.failure(
                f'The {self.label} field is too long (maximum {self.max_length} characters).'
            )
        return ValidationResult.success(value)
