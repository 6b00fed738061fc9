"""
DNS-related Pydantic schemas and content format helpers
"""

import re
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

_NUMBER_PATTERN = re.compile(r'[0-9]+')


def _is_number(value) -> bool:
    """ASCII decimal digits only"""
    return _NUMBER_PATTERN.fullmatch(str(value)) is not None


class RecordType(str, Enum):
    """Enumeration for DNS record types"""
    A = "A"
    AAAA = "AAAA"
    AFSDB = "AFSDB"
    ALIAS = "ALIAS"
    CAA = "CAA"
    CERT = "CERT"
    CNAME = "CNAME"
    DNAME = "DNAME"
    HINFO = "HINFO"
    KX = "KX"
    LOC = "LOC"
    MX = "MX"
    NAPTR = "NAPTR"
    NS = "NS"
    PTR = "PTR"
    RP = "RP"
    SOA = "SOA"
    SPF = "SPF"
    SRV = "SRV"
    SSHFP = "SSHFP"
    TLSA = "TLSA"
    TXT = "TXT"
    URI = "URI"
    # DNSSEC
    CDNSKEY = "CDNSKEY"
    CDS = "CDS"
    DNSKEY = "DNSKEY"
    DS = "DS"
    NSEC = "NSEC"
    NSEC3 = "NSEC3"
    NSEC3PARAM = "NSEC3PARAM"
    RRSIG = "RRSIG"

    @classmethod
    def from_token(cls, token: str) -> Optional["RecordType"]:
        """Resolve a type token case-insensitively, None when unknown"""
        try:
            return cls(token.strip().upper())
        except (ValueError, AttributeError):
            return None


class RecordCandidate(BaseModel):
    """A proposed record write awaiting validation"""
    type: str = Field(..., description="Record type token, e.g. 'CNAME'")
    name: str = Field(..., description="Owner hostname")
    content: str = Field(..., description="Type-specific payload")
    prio: Optional[Union[int, str]] = Field(None, description="Priority as submitted")
    ttl: Optional[Union[int, str]] = Field(None, description="TTL as submitted")
    default_ttl: Optional[int] = Field(None, ge=0, description="TTL used when none is submitted")
    record_id: int = Field(default=0, ge=0, description="Existing record id, 0 when creating")
    zone_name: Optional[str] = Field(None, description="Zone the record belongs to")

    @field_validator('record_id', mode='before')
    @classmethod
    def default_record_id(cls, v):
        return 0 if v is None else v


class ValidatedRecord(BaseModel):
    """Normalized record fields carried by a successful validation"""
    content: str
    name: str
    prio: int = 0
    ttl: int


class DNSValidators:
    """Content format checks shared by the record type validators

    Every helper raises ``ValueError`` with a user-facing message; the
    record validators turn that into a failure result.
    """

    @staticmethod
    def validate_dns_email_format(email: str) -> str:
        """Validate a mailbox in DNS format (dots instead of @)"""
        if '@' in email:
            raise ValueError('SOA admin email must use DNS format (dots instead of @)')

        email = email.rstrip('.')
        parts = email.split('.')
        if len(parts) < 2:
            raise ValueError('SOA admin email must have at least user and domain parts')

        for part in parts:
            if not part:
                raise ValueError('SOA admin email cannot have empty parts')
            if len(part) > 63:
                raise ValueError('SOA admin email parts cannot exceed 63 characters')
            # Escaped dots are allowed in the local part (first.last\.name)
            if not re.match(r'^[a-zA-Z0-9_\\-]+$', part):
                raise ValueError('SOA admin email contains invalid characters')

        return email.lower()

    @staticmethod
    def validate_soa_numbers(serial: str, refresh: str, retry: str, expire: str, minimum: str) -> None:
        """Validate SOA serial and timer fields"""
        raw_values = [serial, refresh, retry, expire, minimum]
        if not all(_is_number(value) for value in raw_values):
            raise ValueError('SOA record numeric values must be non-negative integers')
        values = [int(value) for value in raw_values]

        serial_value, refresh_value, retry_value, expire_value, minimum_value = values
        if serial_value < 0 or serial_value > 4294967295:  # 32-bit unsigned int
            raise ValueError('SOA serial must be between 0 and 4294967295')
        if refresh_value < 1 or refresh_value > 2147483647:
            raise ValueError('SOA refresh must be between 1 and 2147483647 seconds')
        if retry_value < 1 or retry_value > 2147483647:
            raise ValueError('SOA retry must be between 1 and 2147483647 seconds')
        if expire_value < 1 or expire_value > 2147483647:
            raise ValueError('SOA expire must be between 1 and 2147483647 seconds')
        if minimum_value < 0 or minimum_value > 2147483647:
            raise ValueError('SOA minimum must be between 0 and 2147483647 seconds')

    @staticmethod
    def validate_spf_record_syntax(value: str) -> str:
        """Validate SPF mechanisms"""
        valid_mechanisms = ['include:', 'a', 'mx', 'ptr', 'ip4:', 'ip6:', 'exists:', 'redirect=']
        valid_qualifiers = ['+', '-', '~', '?']

        parts = value.split()
        if not parts or parts[0] != 'v=spf1':
            raise ValueError('SPF record must start with v=spf1')

        for part in parts[1:]:
            if part in ['all', '+all', '-all', '~all', '?all']:
                continue

            term = part[1:] if part[0] in valid_qualifiers else part
            found_mechanism = False
            for mechanism in valid_mechanisms:
                if mechanism in ('a', 'mx', 'ptr'):
                    if term == mechanism or term.startswith(mechanism + ':') or term.startswith(mechanism + '/'):
                        found_mechanism = True
                        break
                elif term.startswith(mechanism):
                    found_mechanism = True
                    break

            if not found_mechanism and not part.startswith('exp='):
                raise ValueError(f'Invalid SPF mechanism: {part}')

        return value

    @staticmethod
    def validate_dkim_record(value: str) -> None:
        """Validate DKIM key record"""
        if not value.startswith('v=DKIM1'):
            raise ValueError('DKIM record must start with v=DKIM1')
        if 'p=' not in value:
            raise ValueError('DKIM record must contain a p= parameter')

    @staticmethod
    def validate_dmarc_record(value: str) -> None:
        """Validate DMARC policy record"""
        if not value.startswith('v=DMARC1'):
            raise ValueError('DMARC record must start with v=DMARC1')

        policy_match = re.search(r'(?:^|;)\s*p=([^;]+)', value)
        if not policy_match:
            raise ValueError('DMARC record must contain p= policy parameter')
        policy = policy_match.group(1).strip()
        if policy not in ['none', 'quarantine', 'reject']:
            raise ValueError(f'Invalid DMARC policy: {policy}')

    @staticmethod
    def validate_caa_record_format(value: str) -> str:
        """Validate CAA (Certificate Authority Authorization) record format"""
        parts = value.split(None, 2)
        if len(parts) != 3:
            raise ValueError('CAA record must have exactly 3 parts: flags tag value')

        flags, tag, caa_value = parts

        if not _is_number(flags) or int(flags) > 255:
            raise ValueError('CAA flags must be an integer between 0 and 255')

        valid_tags = ['issue', 'issuewild', 'iodef']
        if tag.lower() not in valid_tags:
            raise ValueError(f'CAA tag must be one of: {", ".join(valid_tags)}')

        if caa_value.startswith('"') and caa_value.endswith('"') and len(caa_value) >= 2:
            if not caa_value[1:-1] and tag.lower() == 'iodef':
                raise ValueError('CAA iodef value cannot be empty')
        elif ' ' in caa_value:
            raise ValueError('CAA value with spaces must be enclosed in double quotes')

        return value

    @staticmethod
    def validate_sshfp_record_format(value: str) -> str:
        """Validate SSHFP (SSH Fingerprint) record format"""
        parts = value.split()
        if len(parts) != 3:
            raise ValueError('SSHFP record must have exactly 3 parts: algorithm fptype fingerprint')

        algorithm, fptype, fingerprint = parts

        # 1=RSA, 2=DSS, 3=ECDSA, 4=Ed25519, 6=Ed448
        if not _is_number(algorithm) or int(algorithm) not in [1, 2, 3, 4, 6]:
            raise ValueError('SSHFP algorithm must be 1 (RSA), 2 (DSS), 3 (ECDSA), 4 (Ed25519) or 6 (Ed448)')

        if not _is_number(fptype) or int(fptype) not in [1, 2]:
            raise ValueError('SSHFP fingerprint type must be 1 (SHA-1) or 2 (SHA-256)')

        if not re.match(r'^[0-9a-fA-F]+$', fingerprint):
            raise ValueError('SSHFP fingerprint must be a hexadecimal string')

        expected_lengths = {1: 40, 2: 64}
        fp_int = int(fptype)
        if len(fingerprint) != expected_lengths[fp_int]:
            raise ValueError(f'SSHFP fingerprint length must be {expected_lengths[fp_int]} characters for type {fp_int}')

        return value

    @staticmethod
    def validate_tlsa_record_format(value: str) -> str:
        """Validate TLSA (Transport Layer Security Authentication) record format"""
        parts = value.split(None, 3)
        if len(parts) != 4:
            raise ValueError('TLSA record must have exactly 4 parts: usage selector matching_type certificate_data')

        usage, selector, matching_type, cert_data = parts

        if not _is_number(usage) or int(usage) not in [0, 1, 2, 3]:
            raise ValueError('TLSA usage must be 0, 1, 2 or 3')
        if not _is_number(selector) or int(selector) not in [0, 1]:
            raise ValueError('TLSA selector must be 0 (full certificate) or 1 (SubjectPublicKeyInfo)')
        if not _is_number(matching_type) or int(matching_type) not in [0, 1, 2]:
            raise ValueError('TLSA matching type must be 0 (exact match), 1 (SHA-256 hash), or 2 (SHA-512 hash)')

        cert_data = cert_data.replace(' ', '')
        if not re.match(r'^[0-9a-fA-F]+$', cert_data):
            raise ValueError('TLSA certificate data must be a hexadecimal string')

        expected_lengths = {1: 64, 2: 128}
        matching_int = int(matching_type)
        if matching_int in expected_lengths and len(cert_data) != expected_lengths[matching_int]:
            raise ValueError(f'TLSA certificate data length must be {expected_lengths[matching_int]} characters for matching type {matching_int}')

        return value

    @staticmethod
    def split_naptr_record(value: str) -> tuple:
        """Split NAPTR content into order, preference, flags, service, regexp, replacement"""
        # Example: 100 10 "u" "E2U+sip" "!^.*$!sip:info@example.com!" .
        match = re.match(r'^(\S+)\s+(\S+)\s+("[^"]*")\s+("[^"]*")\s+("(?:[^"\\]|\\.)*")\s+(\S+)$', value)
        if not match:
            raise ValueError('NAPTR record must have 6 parts: order preference "flags" "service" "regexp" replacement')

        order, preference = match.group(1), match.group(2)
        for label, number in (('order', order), ('preference', preference)):
            if not _is_number(number) or int(number) > 65535:
                raise ValueError(f'NAPTR {label} must be an integer between 0 and 65535')

        flags = match.group(3)[1:-1]
        if not re.match(r'^[a-zA-Z0-9]*$', flags):
            raise ValueError('NAPTR flags must be alphanumeric')

        return match.groups()

    @staticmethod
    def validate_loc_record_format(value: str) -> str:
        """Validate LOC (Location) record format"""
        # Example: 52 22 23.000 N 4 53 32.000 E -2.00m 0.00m 10000m 10m
        pattern = (
            r'^(\d{1,2})(?:\s+(\d{1,2})(?:\s+(\d{1,2}(?:\.\d{1,3})?))?)?\s+([NS])\s+'
            r'(\d{1,3})(?:\s+(\d{1,2})(?:\s+(\d{1,2}(?:\.\d{1,3})?))?)?\s+([EW])\s+'
            r'(-?\d+(?:\.\d{1,2})?)m?'
            r'(?:\s+(\d+(?:\.\d{1,2})?)m?)?'
            r'(?:\s+(\d+(?:\.\d{1,2})?)m?)?'
            r'(?:\s+(\d+(?:\.\d{1,2})?)m?)?$'
        )
        match = re.match(pattern, value.strip(), re.IGNORECASE | re.ASCII)
        if not match:
            raise ValueError('Invalid LOC record format')

        lat_deg, lat_min, lat_sec = match.group(1), match.group(2), match.group(3)
        lon_deg, lon_min, lon_sec = match.group(5), match.group(6), match.group(7)

        if int(lat_deg) > 90:
            raise ValueError('LOC latitude degrees must be between 0 and 90')
        if int(lon_deg) > 180:
            raise ValueError('LOC longitude degrees must be between 0 and 180')
        for minutes in (lat_min, lon_min):
            if minutes is not None and int(minutes) > 59:
                raise ValueError('LOC minutes must be between 0 and 59')
        for seconds in (lat_sec, lon_sec):
            if seconds is not None and float(seconds) >= 60:
                raise ValueError('LOC seconds must be between 0 and 59.999')

        altitude = float(match.group(9))
        if altitude < -100000.00 or altitude > 42849672.95:
            raise ValueError('LOC altitude must be between -100000.00 and 42849672.95 meters')

        return value
