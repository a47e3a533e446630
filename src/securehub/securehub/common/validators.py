from __future__ import annotations

import ipaddress

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def _canonical(address) -> str:
    # IPv4-mapped IPv6 (::ffff:a.b.c.d) compares as the plain IPv4 address.
    mapped = getattr(address, "ipv4_mapped", None)
    return str(mapped or address)


def require_ip_address(value: str, field_name: str = "IP address") -> str:
    """Return the address in canonical text form or raise ValidationError."""
    value = require_non_empty(value, field_name)
    try:
        address = ipaddress.ip_address(value)
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid address: {value}") from None
    if getattr(address, "scope_id", None):
        raise ValidationError(f"{field_name} must not carry a zone index: {value}")
    return _canonical(address)


def normalize_ip_address(value: str) -> str:
    """Canonical form when ``value`` parses as an address, else the stripped text."""
    value = (value or "").strip()
    try:
        return _canonical(ipaddress.ip_address(value))
    except ValueError:
        return value
