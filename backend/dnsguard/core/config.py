"""
Configuration management for the DNS record validation engine
"""

from functools import lru_cache
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from .exceptions import ConfigurationException


DEFAULT_DOMAIN_RECORD_TYPES = [
    "A", "AAAA", "AFSDB", "ALIAS", "CAA", "CERT", "CNAME", "DNAME", "HINFO",
    "KX", "LOC", "MX", "NAPTR", "NS", "PTR", "RP", "SOA", "SPF", "SRV",
    "SSHFP", "TLSA", "TXT", "URI",
]

DEFAULT_REVERSE_RECORD_TYPES = ["CNAME", "LOC", "NS", "PTR", "SOA", "TXT"]

DNSSEC_RECORD_TYPES = [
    "CDNSKEY", "CDS", "DNSKEY", "DS", "NSEC", "NSEC3", "NSEC3PARAM", "RRSIG",
]


def _split_types(v):
    if isinstance(v, str):
        return [item.strip().upper() for item in v.split(',') if item.strip()]
    return [str(item).upper() for item in v]


class DNSSettings(BaseModel):
    """Record validation policy"""
    default_ttl: int = Field(default=86400, ge=0, le=2147483647)
    hostname_max_length: int = Field(default=255, ge=1, le=255)
    top_level_tld_check: bool = False
    allow_underscores: bool = True
    lowercase_hostnames: bool = True
    domain_record_types: List[str] = Field(default_factory=lambda: list(DEFAULT_DOMAIN_RECORD_TYPES))
    reverse_record_types: List[str] = Field(default_factory=lambda: list(DEFAULT_REVERSE_RECORD_TYPES))

    @field_validator('domain_record_types', 'reverse_record_types', mode='before')
    @classmethod
    def parse_record_types(cls, v):
        return _split_types(v)


class DNSSECSettings(BaseModel):
    """DNSSEC record types are only accepted when enabled"""
    enabled: bool = False


class DatabaseSettings(BaseModel):
    """Record store connection"""
    url: str = "sqlite:///./powerdns.db"
    echo: bool = False
    pdns_db_name: Optional[str] = None
    domains_table: str = "domains"
    records_table: str = "records"


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    APP_NAME: str = "dnsguard"
    DEBUG: bool = Field(default=False, description="Debug mode")

    dns: DNSSettings = Field(default_factory=DNSSettings)
    dnssec: DNSSECSettings = Field(default_factory=DNSSECSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    class Config:
        env_prefix = "DNSGUARD_"
        env_nested_delimiter = "__"
        env_file = [".env", "../.env"]
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationException(
            "Invalid dnsguard configuration",
            details={"errors": [err["msg"] for err in e.errors()]},
            suggestions=["Check DNSGUARD_* environment variables and the .env file"],
        ) from e


class ConfigurationManager:
    """Read-only (section, key) view over the settings

    Validators receive one of these explicitly instead of reaching for the
    cached settings, so tests can build one from hand-made ``Settings``.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings if settings is not None else Settings()

    @classmethod
    def load(cls) -> "ConfigurationManager":
        """Build from environment settings"""
        return cls(get_settings())

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a setting value, falling back to ``default`` for unknown keys"""
        section_settings = getattr(self.settings, section, None)
        if section_settings is None:
            return default
        return getattr(section_settings, key, default)
