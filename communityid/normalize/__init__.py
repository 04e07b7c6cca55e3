"""
normalize/__init__.py

Public API for the normalize sub-package: validation, ICMP type mapping,
binary encoding and endpoint ordering.
"""

from .canonical import canonicalize, order_endpoints
from .icmp import ICMP4_TYPES, ICMP6_TYPES, IcmpTypeMap, type_map_for
from .protocols import PROTOCOL_NAMES, resolve_protocol, supports_ports
from .validator import ValidatedFlow, validate_flow, validate_seed

__all__ = [
    "canonicalize",
    "order_endpoints",
    "ICMP4_TYPES",
    "ICMP6_TYPES",
    "IcmpTypeMap",
    "type_map_for",
    "PROTOCOL_NAMES",
    "resolve_protocol",
    "supports_ports",
    "ValidatedFlow",
    "validate_flow",
    "validate_seed",
]
