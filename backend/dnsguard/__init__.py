"""
dnsguard - DNS record validation engine for PowerDNS-backed administration tools
"""

__version__ = "1.0.0"
